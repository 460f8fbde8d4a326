"""Exceptions and the abstract base class for candidate normalizers."""

from abc import ABC, abstractmethod

from condorcet.models import CandidateID


class BallotParseError(ValueError):
    """Raised when a line of input cannot be parsed into a ballot.

    The reader records these against the offending line and carries on with
    the next one.
    """
    pass


class CandidateParseError(BallotParseError):
    """Raised when a candidate name is rejected by a normalizer."""
    pass


class CyclicBallotError(BallotParseError):
    """Raised when a ballot references the same candidate more than once."""

    def __init__(self, candidate: CandidateID):
        self.candidate = candidate
        super().__init__(
            "cyclic vote detected: cannot reference a candidate twice in a vote"
        )


class BallotSourceError(OSError):
    """Raised when the underlying line source fails before end of input.

    Unlike BallotParseError this aborts the read session.
    """
    pass


class CandidateNormalizer(ABC):
    """Abstract base class for turning user-entered names into CandidateIDs.

    Normalizers are callable, so any plain function taking a string and
    returning a CandidateID can be used by the reader in their place.
    """

    @abstractmethod
    def normalize(self, raw: str) -> CandidateID:
        """Convert a raw candidate name into a CandidateID.

        Args:
            raw: A single name as it appeared on the ballot line

        Returns:
            The normalized identifier

        Raises:
            ValueError: If the name corresponds to no valid candidate
                (usually a CandidateParseError)
        """
        pass

    def __call__(self, raw: str) -> CandidateID:
        return self.normalize(raw)
