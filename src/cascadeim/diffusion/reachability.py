# src/cascadeim/diffusion/reachability.py

"""
Deterministic reachability inside a single cascade.

A cascade is a directed (acyclic) graph: either a networkx.DiGraph or any
mapping node -> iterable of out-neighbors. Every node reached from the seed
set by following outgoing edges counts as influenced; seeds always count
themselves.
"""

from collections import deque
from typing import Any, Iterable, List, Set


def _out_neighbors(cascade, u) -> Iterable[Any]:
    # nodes with no outgoing edges may be missing from the mapping
    if u in cascade:
        return cascade[u]
    return ()


def reachable_count(cascade, seed_set: Iterable[Any]) -> int:
    """
    Count the distinct nodes reachable from `seed_set` in `cascade`.

    Multi-source BFS: all seeds are marked visited and counted up front,
    then outgoing edges are followed. Each node is counted and enqueued at
    most once, so duplicate edges and cycles are harmless.

    Args:
        cascade: networkx.DiGraph or mapping node -> out-neighbors.
        seed_set: Seed nodes. They need not appear in the cascade.

    Returns:
        Number of reached nodes, seeds included (0 for an empty seed set).
    """
    # Kept apart from hop_layers: the selector calls this once per
    # (candidate, cascade) pair and only needs the count, not the layers.
    explored: Set[Any] = set(seed_set)
    queue = deque(explored)
    count = len(explored)

    while queue:
        u = queue.popleft()
        for v in _out_neighbors(cascade, u):
            if v not in explored:
                explored.add(v)
                queue.append(v)
                count += 1

    return count


def hop_layers(cascade, seed_set: Iterable[Any]) -> List[Set[Any]]:
    """
    Nodes of `cascade` grouped by their hop distance from `seed_set`.

    layers[0] is the seed set, layers[h] the nodes first reached after h
    edges. Empty list for an empty seed set; the cascade depth reached from
    the seeds is len(layers) - 1.
    """
    frontier: Set[Any] = set(seed_set)
    if not frontier:
        return []

    layers: List[Set[Any]] = [frontier]
    seen: Set[Any] = set(frontier)

    while frontier:
        nxt = {v for u in frontier for v in _out_neighbors(cascade, u) if v not in seen}
        if nxt:
            layers.append(nxt)
            seen |= nxt
        frontier = nxt

    return layers


def reachable_set(cascade, seed_set: Iterable[Any]) -> Set[Any]:
    """The nodes counted by reachable_count, seeds included."""
    reached: Set[Any] = set()
    for layer in hop_layers(cascade, seed_set):
        reached |= layer
    return reached
