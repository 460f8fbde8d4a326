"""Core data models for ballots and election results."""

from dataclasses import dataclass, field
from typing import Any, Self

# A normalized candidate identifier, e.g. "ALICE".
CandidateID = str

# 0 is the most preferred. Candidates may share a preference (a tie).
Preference = int

# Candidates omitted from a ballot rank below every candidate present on it.
#
# Example:
#     >>> ballot: Ballot = {"DAN": 0, "ALICE": 1, "SALLY": 1}
Ballot = dict[CandidateID, Preference]


@dataclass
class InvalidBallot:
    """A line of input that could not be parsed into a ballot.

    Attributes:
        line: 1-indexed line number in the source
        issue: Human-readable reason the line was rejected
    """
    line: int
    issue: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "issue": self.issue}


@dataclass
class Placement:
    """A candidate's placement in an election result.

    Attributes:
        name: Candidate identifier
        rank: 1-indexed placement (tied candidates share the same rank)
        tied: Whether this candidate is tied with others at this rank
    """
    name: CandidateID
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rank": self.rank, "tied": self.tied}

    @classmethod
    def build_ranking(
        cls, ordered: list[CandidateID | list[CandidateID]]
    ) -> list[Self]:
        """Build a list of Placements from an ordered list.

        Args:
            ordered: Candidates in order from 1st to last place.
                Each element is either a single name (str) or a list of
                names (list[str]) for tied candidates.

        Returns:
            List of Placement objects with correct ranks and tied flags.
        """
        placements = []
        rank = 1
        for entry in ordered:
            if isinstance(entry, list):
                for name in entry:
                    placements.append(cls(name=name, rank=rank, tied=True))
                rank += len(entry)
            else:
                placements.append(cls(name=entry, rank=rank, tied=False))
                rank += 1

        return placements


@dataclass
class VotingResult:
    """Result from a voting system.

    Attributes:
        system_name: Human-readable name of the voting system
        final_ranking: Candidates in order from 1st to last place, ties
                       already broken
        placements: The same order with shared ranks for candidates the
                    system could not separate
        details: System-specific details for transparency/debugging
                 (e.g., pairwise matrices, win counts, tie groups)
    """
    system_name: str
    final_ranking: list[CandidateID]
    placements: list[Placement] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    def get_place(self, candidate: CandidateID) -> int | None:
        """Get the 1-indexed placement for a candidate, or None if not found."""
        for p in self.placements:
            if p.name == candidate:
                return p.rank
        return None
