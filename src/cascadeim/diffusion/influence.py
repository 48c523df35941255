# src/cascadeim/diffusion/influence.py

"""
Influence of a seed set over a collection of cascades.

The influence f(S) is the average, over cascades, of the number of nodes
reachable from S. This is the objective the greedy selector maximizes.
"""

from typing import Any, Iterable, List, Sequence

from cascadeim.diffusion.reachability import reachable_count
from cascadeim.errors import EmptyCascadeSetError


def per_cascade_counts(cascades: Sequence[Any], seed_set: Iterable[Any]) -> List[int]:
    """Reachable count of `seed_set` in every cascade, in cascade order."""
    seed_set = set(seed_set)
    return [reachable_count(cascade, seed_set) for cascade in cascades]


def estimate_influence(cascades: Sequence[Any], seed_set: Iterable[Any]) -> float:
    """
    Average number of nodes reachable from `seed_set` across `cascades`.

    Cascades are evaluated independently; the result does not depend on
    their order.

    Args:
        cascades: List of cascades (or a CascadeSet).
        seed_set: Seed nodes.

    Returns:
        Influence of the seed set (float, 0.0 for an empty seed set).

    Raises:
        EmptyCascadeSetError: if there are no cascades.
    """
    if len(cascades) == 0:
        raise EmptyCascadeSetError("Cannot estimate influence over zero cascades.")

    seed_set = set(seed_set)
    total = 0
    for cascade in cascades:
        total += reachable_count(cascade, seed_set)

    return total / len(cascades)
