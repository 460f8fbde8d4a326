"""Ballot parsers and candidate name normalizers."""

from .base import (
    BallotParseError,
    BallotSourceError,
    CandidateNormalizer,
    CandidateParseError,
    CyclicBallotError,
)
from .ballots import BallotReader, read_all
from .normalize import BasicNormalizer, KnownCandidates, basic_normalize, default_normalizer

__all__ = [
    "BallotParseError",
    "BallotReader",
    "BallotSourceError",
    "BasicNormalizer",
    "CandidateNormalizer",
    "CandidateParseError",
    "CyclicBallotError",
    "KnownCandidates",
    "basic_normalize",
    "default_normalizer",
    "read_all",
]
