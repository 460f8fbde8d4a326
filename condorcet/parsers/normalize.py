"""Candidate name normalizers."""

from collections.abc import Callable, Iterable

from condorcet.models import CandidateID
from condorcet.parsers.base import CandidateNormalizer, CandidateParseError


def basic_normalize(raw: str) -> CandidateID:
    """Trim surrounding whitespace and upper-case. Never fails."""
    return raw.strip().upper()


class BasicNormalizer(CandidateNormalizer):
    """Trims and upper-cases names, recording every distinct id it produces.

    Useful when the candidate universe is not known up front: after reading,
    ``discovered`` lists each normalized id once, in first-seen order.

    Example:
        >>> normalizer = BasicNormalizer()
        >>> normalizer(" Bob"), normalizer("bob"), normalizer("alice ")
        ('BOB', 'BOB', 'ALICE')
        >>> normalizer.discovered
        ['BOB', 'ALICE']
    """

    def __init__(self):
        self._discovered: list[CandidateID] = []
        self._seen: set[CandidateID] = set()

    @property
    def discovered(self) -> list[CandidateID]:
        """Distinct ids produced so far, in first-seen order."""
        return self._discovered.copy()

    def normalize(self, raw: str) -> CandidateID:
        candidate = basic_normalize(raw)
        if candidate not in self._seen:
            self._seen.add(candidate)
            self._discovered.append(candidate)
        return candidate


class KnownCandidates(CandidateNormalizer):
    """Restricts ballots to a fixed list of candidates.

    Names are first passed through ``normalizer`` (basic_normalize by
    default), so the allowed list is compared in normalized form too.
    """

    def __init__(
        self,
        candidates: Iterable[str],
        normalizer: Callable[[str], CandidateID] = basic_normalize,
    ):
        self.normalizer = normalizer
        self.candidates = [normalizer(c) for c in candidates]
        self._allowed = set(self.candidates)

    def normalize(self, raw: str) -> CandidateID:
        candidate = self.normalizer(raw)
        if candidate not in self._allowed:
            raise CandidateParseError(f"unknown candidate: {raw.strip()!r}")
        return candidate


def default_normalizer() -> BasicNormalizer:
    """Return a fresh BasicNormalizer with nothing discovered yet."""
    return BasicNormalizer()
