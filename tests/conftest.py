"""Shared test helpers."""

import random

from condorcet.models import Ballot


def make_ballots(rankings_table: dict[str, dict[str, int]]) -> list[Ballot]:
    """Build ballots from a compact rankings table.

    Args:
        rankings_table: {voter_id: {candidate_id: rank}}

    Returns:
        One ballot per voter, in table order.
    """
    return [dict(ranking) for ranking in rankings_table.values()]


def ballots_from_counts(counts: dict[str, int], seed: int = 7) -> list[Ballot]:
    """Build ballots from {order: repetitions}, shuffled with a fixed seed.

    Each character of an order string is a candidate, most preferred first,
    so {"ABC": 2} is two ballots ranking A, then B, then C.
    """
    ballots = []
    for order, count in counts.items():
        ballot = {candidate: i for i, candidate in enumerate(order)}
        ballots.extend(dict(ballot) for _ in range(count))
    random.Random(seed).shuffle(ballots)
    return ballots
