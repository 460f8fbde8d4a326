"""Voting systems for ranking candidates."""

from .base import VotingSystem
from .schulze import SchulzeSystem, evaluate

__all__ = ["SchulzeSystem", "VotingSystem", "evaluate"]
