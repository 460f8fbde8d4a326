"""Shared fixtures for voting system tests."""

import pytest
from tests.conftest import ballots_from_counts, make_ballots


@pytest.fixture
def clear_winner():
    """Dataset 1: Clear winner, 3 voters, 4 candidates.

         V1  V2  V3
    A     1   1   2
    B     2   3   1
    C     3   2   3
    D     4   4   4

    Ranking: A, B, C, D
    """
    return make_ballots({
        "V1": {"A": 1, "B": 2, "C": 3, "D": 4},
        "V2": {"A": 1, "B": 3, "C": 2, "D": 4},
        "V3": {"A": 2, "B": 1, "C": 3, "D": 4},
    })


@pytest.fixture
def disagreement():
    """Dataset 2: Split preferences, 5 voters, 4 candidates.

         V1  V2  V3  V4  V5
    A     1   2   3   1   4
    B     2   1   4   3   1
    C     3   4   1   4   2
    D     4   3   2   2   3

    No cycles. Ranking: A, B, C, D
    """
    return make_ballots({
        "V1": {"A": 1, "B": 2, "C": 3, "D": 4},
        "V2": {"A": 2, "B": 1, "C": 4, "D": 3},
        "V3": {"A": 3, "B": 4, "C": 1, "D": 2},
        "V4": {"A": 1, "B": 3, "C": 4, "D": 2},
        "V5": {"A": 4, "B": 1, "C": 2, "D": 3},
    })


@pytest.fixture
def unanimous():
    """Dataset 3: Unanimous voters, 3 voters, 3 candidates.

         V1  V2  V3
    A     1   1   1
    B     2   2   2
    C     3   3   3

    Ranking: A, B, C
    """
    return make_ballots({
        "V1": {"A": 1, "B": 2, "C": 3},
        "V2": {"A": 1, "B": 2, "C": 3},
        "V3": {"A": 1, "B": 2, "C": 3},
    })


@pytest.fixture
def two_candidates():
    """Dataset 4: Two candidates, 3 voters.

         V1  V2  V3
    A     1   2   1
    B     2   1   2

    Ranking: A, B
    """
    return make_ballots({
        "V1": {"A": 1, "B": 2},
        "V2": {"A": 2, "B": 1},
        "V3": {"A": 1, "B": 2},
    })


@pytest.fixture
def perfect_cycle():
    """Dataset 5: Perfect cycle, 3 voters, 3 candidates.

         V1  V2  V3
    A     1   3   2
    B     2   1   3
    C     3   2   1

    Perfectly symmetric. Every candidate beats one other pairwise.
    All tie on wins, so the order falls back to identifiers.
    """
    return make_ballots({
        "V1": {"A": 1, "B": 2, "C": 3},
        "V2": {"A": 3, "B": 1, "C": 2},
        "V3": {"A": 2, "B": 3, "C": 1},
    })


@pytest.fixture
def electowiki_five():
    """Dataset 6: 45 voters, 5 candidates (electowiki Schulze example 1).

    Ranking: E, A, C, B, D
    """
    return ballots_from_counts({
        "ACBED": 5,
        "ADECB": 5,
        "BEDAC": 8,
        "CABED": 3,
        "CAEBD": 7,
        "CBADE": 2,
        "DCEBA": 7,
        "EBADC": 8,
    })


@pytest.fixture
def electowiki_four():
    """Dataset 7: 30 voters, 4 candidates (electowiki Schulze example 2).

    Ranking: D, A, C, B
    """
    return ballots_from_counts({
        "ACBD": 5,
        "ACDB": 2,
        "ADCB": 3,
        "BACD": 4,
        "CBDA": 3,
        "CDBA": 3,
        "DACB": 1,
        "DBAC": 5,
        "DCBA": 4,
    })


@pytest.fixture
def electowiki_omitted():
    """Dataset 8: electowiki Schulze example 3, once in full and once with
    every ballot's last choice left off.

    Both rank B, A, D, E, C.
    """
    full = {
        "ABDEC": 3,
        "ADEBC": 5,
        "ADECB": 1,
        "BADEC": 2,
        "BDECA": 2,
        "CABDE": 4,
        "CBADE": 6,
        "DBECA": 2,
        "DECAB": 5,
    }
    truncated = {order[:-1]: count for order, count in full.items()}
    return ballots_from_counts(full), ballots_from_counts(truncated)
