"""Schulze method (Condorcet) election tabulation."""

from condorcet.models import Ballot, CandidateID, InvalidBallot, Placement, VotingResult
from condorcet.parsers import BallotReader, default_normalizer, read_all
from condorcet.voting import SchulzeSystem, evaluate

__all__ = [
    "Ballot",
    "BallotReader",
    "CandidateID",
    "InvalidBallot",
    "Placement",
    "SchulzeSystem",
    "VotingResult",
    "default_normalizer",
    "evaluate",
    "read_all",
]
