"""Schulze method voting system."""

import logging
from collections.abc import Iterable, Sequence

from condorcet.models import Ballot, CandidateID, Placement, VotingResult
from condorcet.voting.base import VotingSystem

logger = logging.getLogger(__name__)


def find_candidates(ballots: Iterable[Ballot]) -> list[CandidateID]:
    """Return every candidate named on any ballot, sorted by identifier."""
    seen: set[CandidateID] = set()
    for ballot in ballots:
        seen.update(ballot)
    return sorted(seen)


def pairwise_preferences(
    ballots: Iterable[Ballot], candidates: Sequence[CandidateID]
) -> list[list[int]]:
    """Count head-to-head preferences.

    d[i][j] is the number of ballots ranking candidates[i] strictly ahead of
    candidates[j]. A candidate missing from a ballot is ranked after every
    candidate on it, so it loses to all of them and ties with the other
    missing candidates.
    """
    n = len(candidates)
    comp_idx = {c: i for i, c in enumerate(candidates)}
    d = [[0] * n for _ in range(n)]

    for ballot in ballots:
        for comp_a, pref_a in ballot.items():
            i = comp_idx.get(comp_a)
            if i is None:
                continue
            for j, comp_b in enumerate(candidates):
                if i == j:
                    continue
                pref_b = ballot.get(comp_b)
                if pref_b is None or pref_a < pref_b:
                    d[i][j] += 1

    return d


def strongest_paths(d: list[list[int]]) -> list[list[int]]:
    """Compute strongest beatpath strengths from a pairwise matrix.

    Starts from the direct defeats (d[i][j] where it beats d[j][i], else 0)
    and widens them with a Floyd-Warshall pass over the (max, min) semiring,
    intermediate candidate outermost.
    """
    n = len(d)
    p = [[0] * n for _ in range(n)]

    for i in range(n):
        for j in range(n):
            if i != j and d[i][j] > d[j][i]:
                p[i][j] = d[i][j]

    for k in range(n):
        for i in range(n):
            if i == k:
                continue
            for j in range(n):
                if j == i or j == k:
                    continue
                # Strength of path through k is min of the two links
                strength_via_k = min(p[i][k], p[k][j])
                if strength_via_k > p[i][j]:
                    p[i][j] = strength_via_k

    return p


def schulze_wins(p: list[list[int]]) -> list[int]:
    """Count, for each candidate, how many others it beats: p[i][j] > p[j][i]."""
    n = len(p)
    return [
        sum(1 for j in range(n) if j != i and p[i][j] > p[j][i])
        for i in range(n)
    ]


class SchulzeSystem(VotingSystem):
    """Schulze method voting system.

    A Condorcet method that uses "beatpath" strengths to determine rankings.
    It handles cyclic preferences gracefully by finding the strongest path
    between each pair of candidates.

    Algorithm:
    1. Collect the candidate universe from all ballots
    2. Build pairwise preference matrix: d[A][B] = ballots preferring A over B
    3. Calculate strongest path strengths using Floyd-Warshall variant
    4. A beats B (in Schulze sense) if path strength A→B > path strength B→A
    5. Rank by number of Schulze wins

    Candidates with the same number of wins are ordered by identifier so the
    ranking is always reproducible; they are reported as tied in
    ``placements`` and ``details["ties"]``.

    This is the win-count simplification, not ranking by repeated Schwartz
    set elimination. The two can disagree on some cyclic inputs.

    Complexity: O(n³) where n is the number of candidates.
    """

    @property
    def name(self) -> str:
        return "Schulze Method"

    @property
    def description(self) -> str:
        return "Condorcet method using beatpath strengths to handle cyclic preferences"

    def calculate(self, ballots: Sequence[Ballot]) -> VotingResult:
        ballots = list(ballots)
        candidates = find_candidates(ballots)
        n = len(candidates)
        logger.debug("counting %d ballots over %d candidates", len(ballots), n)

        d = pairwise_preferences(ballots, candidates)
        p = strongest_paths(d)
        wins = schulze_wins(p)
        logger.debug("schulze wins: %s", dict(zip(candidates, wins)))

        # Most wins first; equal wins fall back to identifier order
        order = sorted(range(n), key=lambda i: (-wins[i], candidates[i]))
        final_ranking = [candidates[i] for i in order]

        # Group equal win counts for placements
        ordered: list[CandidateID | list[CandidateID]] = []
        ties = []
        i = 0
        while i < n:
            j = i + 1
            while j < n and wins[order[j]] == wins[order[i]]:
                j += 1
            group = final_ranking[i:j]
            if len(group) == 1:
                ordered.append(group[0])
            else:
                logger.info(
                    "%s are tied on %d wins, ordering by identifier",
                    group, wins[order[i]],
                )
                ordered.append(group)
                ties.append(group)
            i = j

        pairwise_matrix = {
            candidates[i]: {
                candidates[j]: d[i][j]
                for j in range(n)
            }
            for i in range(n)
        }

        path_strengths = {
            candidates[i]: {
                candidates[j]: p[i][j]
                for j in range(n)
            }
            for i in range(n)
        }

        details: dict = {
            "pairwise_preferences": pairwise_matrix,
            "path_strengths": path_strengths,
            "schulze_wins": {candidates[i]: wins[i] for i in range(n)},
            "ties": ties,
            "explanation": (
                "Each cell d[A][B] shows ballots preferring A over B. "
                "Path strengths use Floyd-Warshall to find strongest "
                "indirect paths. A beats B if path A→B > path B→A. "
                "Candidates are ranked by how many others they beat."
            ),
        }
        if ties:
            details["explanation"] += (
                " Candidates with equal wins are listed by identifier."
            )

        return VotingResult(
            system_name=self.name,
            final_ranking=final_ranking,
            placements=Placement.build_ranking(ordered),
            details=details,
        )


def evaluate(ballots: Iterable[Ballot]) -> list[CandidateID]:
    """Rank candidates with the Schulze method.

    Args:
        ballots: Ballots mapping candidate -> preference (0 = most preferred).
            A ballot must not name a candidate twice.

    Returns:
        Every candidate named on any ballot, most preferred first. Empty when
        no ballot names a candidate.

    Example:
        >>> evaluate([{"DAN": 0, "ALICE": 1, "SALLY": 2}, {"BOB": 0}])
        ['DAN', 'ALICE', 'BOB', 'SALLY']
    """
    return SchulzeSystem().calculate(list(ballots)).final_ranking
