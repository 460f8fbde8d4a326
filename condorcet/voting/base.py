"""Abstract base class for voting systems."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from condorcet.models import Ballot, VotingResult


class VotingSystem(ABC):
    """Abstract base class for voting systems.

    Each voting system implementation calculates a final ranking from
    a list of ballots using its own algorithm.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this voting system."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this voting system works."""
        return ""

    @abstractmethod
    def calculate(self, ballots: Sequence[Ballot]) -> VotingResult:
        """Calculate the final ranking using this voting system.

        Args:
            ballots: Ballots to count. Ballots may rank different subsets
                of candidates; the candidate universe is their union.

        Returns:
            VotingResult with the final ranking and calculation details
        """
        pass
