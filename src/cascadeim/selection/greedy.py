# src/cascadeim/selection/greedy.py

"""
Greedy influence maximization over sampled cascades.

    Start with A = ∅
    for i = 1 to k:
        choose v maximizing f(A ∪ {v}) − f(A)
        A ← A ∪ {v}

where f is the average reachable count over all cascades (see
cascadeim.diffusion.influence). Candidates are scanned in ascending node id
order and ties keep the first candidate seen, so results are reproducible.

Two optional speed-ups leave the output unchanged:
  - processes: score the candidates of a round in a multiprocessing pool
  - lazy: CELF lazy forward evaluation with a max-heap of stale gains
"""

import heapq
import logging
import multiprocessing as mp
from dataclasses import dataclass, field
from functools import partial
from typing import Any, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from tqdm import tqdm

from cascadeim.diffusion.influence import estimate_influence, per_cascade_counts
from cascadeim.errors import EmptyCascadeSetError
from cascadeim.graphs.cascades import build_adjacency

logger = logging.getLogger(__name__)


@dataclass
class GreedyResult:
    """
    Trace of one greedy run.

    Attributes:
        selection_order: [v1, v2, ..., vk] in the order selected
        spreads:         [f({v1}), f({v1,v2}), ..., f(A_k)]
        marginal_gains:  [f(A_1) − 0, f(A_2) − f(A_1), ..., f(A_k) − f(A_{k-1})]
        evaluations:     number of influence evaluations performed
    """

    selection_order: List[Any] = field(default_factory=list)
    spreads: List[float] = field(default_factory=list)
    marginal_gains: List[float] = field(default_factory=list)
    evaluations: int = 0

    @property
    def seed_set(self) -> FrozenSet[Any]:
        return frozenset(self.selection_order)

    @property
    def influence(self) -> float:
        """Influence of the final seed set (0.0 when nothing was selected)."""
        return self.spreads[-1] if self.spreads else 0.0


# ---------------------------------------------------------------------------
# multiprocessing helpers
# ---------------------------------------------------------------------------

_WORKER_CASCADES: Optional[List[Any]] = None


def _init_worker(cascades: List[Any]) -> None:
    global _WORKER_CASCADES
    _WORKER_CASCADES = cascades


def _worker_influence(seeds: Tuple[Any, ...], u: Any) -> float:
    return estimate_influence(_WORKER_CASCADES, set(seeds) | {u})


def _worker_total(seeds: Tuple[Any, ...], u: Any) -> int:
    return sum(per_cascade_counts(_WORKER_CASCADES, set(seeds) | {u}))


def _chunksize(num_tasks: int, processes: int) -> int:
    # aim for ~4 chunks per worker to keep IPC overhead low
    return max(1, num_tasks // (4 * processes))


def _score_candidates(
    cascades: List[Any],
    seeds: Set[Any],
    candidates: List[Any],
    pool,
    processes: int,
    totals: bool = False,
    desc: str = "candidates",
    show_progress: bool = False,
) -> List[Any]:
    """
    Score every candidate against the current seeds, in candidate order.

    Returns influences (or integer reach totals when `totals` is set).
    Results always come back in the order of `candidates`, pool or not.
    """
    if pool is None:
        iterable = tqdm(candidates, desc=desc, leave=False) if show_progress else candidates
        if totals:
            return [sum(per_cascade_counts(cascades, seeds | {u})) for u in iterable]
        return [estimate_influence(cascades, seeds | {u}) for u in iterable]

    worker = partial(_worker_total if totals else _worker_influence, tuple(sorted(seeds)))
    results = pool.imap(worker, candidates, chunksize=_chunksize(len(candidates), processes))
    if show_progress:
        results = tqdm(results, total=len(candidates), desc=desc, leave=False)
    return list(results)


# ---------------------------------------------------------------------------
# greedy variants
# ---------------------------------------------------------------------------


def _plain_greedy(cascades, universe, k, pool, processes, show_progress) -> GreedyResult:
    result = GreedyResult()
    selected_set: Set[Any] = set()
    previous_influence = 0.0

    for i in range(k):
        candidates = [u for u in universe if u not in selected_set]
        scores = _score_candidates(
            cascades,
            selected_set,
            candidates,
            pool,
            processes,
            desc=f"round {i + 1}/{k}",
            show_progress=show_progress,
        )
        result.evaluations += len(candidates)

        best_node: Optional[Any] = None
        best_gain = 0.0
        best_influence = previous_influence

        for u, influence_T in zip(candidates, scores):
            delta = influence_T - previous_influence
            if best_node is None or delta > best_gain:
                best_node = u
                best_gain = delta
                best_influence = influence_T

        if best_node is None:
            logger.warning(
                "node universe exhausted after %d of %d rounds; stopping early",
                i,
                k,
            )
            break

        selected_set.add(best_node)
        previous_influence = best_influence
        _record(result, best_node, best_influence, best_gain, i, k)

    return result


def _lazy_greedy(cascades, universe, k, pool, processes, show_progress) -> GreedyResult:
    """
    CELF: gains only shrink as the seed set grows, so a node whose gain was
    computed for the current seed set and still tops the heap is the winner.

    Heap entries are (-gain, node, round_computed, reach_total). Gains are
    kept as integer reach totals so stale and fresh entries compare exactly;
    equal gains pop in ascending node order.
    """
    n = len(cascades)
    result = GreedyResult()
    selected_set: Set[Any] = set()
    previous_total = 0
    previous_influence = 0.0

    if k == 0:
        return result

    candidates = list(universe)
    totals = _score_candidates(
        cascades,
        selected_set,
        candidates,
        pool,
        processes,
        totals=True,
        desc="initial gains",
        show_progress=show_progress,
    )
    result.evaluations += len(candidates)
    heap = [(-total, u, 0, total) for u, total in zip(candidates, totals)]
    heapq.heapify(heap)

    while len(result.selection_order) < k and heap:
        neg_gain, u, computed_round, total_T = heapq.heappop(heap)
        current_round = len(result.selection_order)

        if computed_round == current_round:
            influence_T = total_T / n
            gain = influence_T - previous_influence
            selected_set.add(u)
            previous_total = total_T
            previous_influence = influence_T
            _record(result, u, influence_T, gain, current_round, k)
        else:
            total_T = sum(per_cascade_counts(cascades, selected_set | {u}))
            result.evaluations += 1
            heapq.heappush(heap, (-(total_T - previous_total), u, current_round, total_T))

    if len(result.selection_order) < k:
        logger.warning(
            "node universe exhausted after %d of %d rounds; stopping early",
            len(result.selection_order),
            k,
        )
    return result


def _record(result: GreedyResult, node, influence: float, gain: float, i: int, k: int) -> None:
    result.selection_order.append(node)
    result.spreads.append(influence)
    result.marginal_gains.append(gain)
    logger.info(
        "[iter %d/%d] chose v = %s, marginal gain = %.3f, f(A) = %.3f",
        i + 1,
        k,
        node,
        gain,
        influence,
    )


def greedy_influence_maximization(
    cascades: Sequence[Any],
    node_universe: Iterable[Any],
    k: int,
    *,
    lazy: bool = False,
    processes: Optional[int] = None,
    show_progress: bool = False,
) -> GreedyResult:
    """
    Greedy approximation algorithm for influence maximization over cascades.

    Args:
        cascades:
            Cascades (networkx DiGraphs or adjacency mappings), or a CascadeSet.
        node_universe:
            Candidate nodes. Scanned in ascending order whatever order is given.
        k:
            Number of seeds to select. k=0 returns an empty result without
            evaluating anything. If k exceeds the universe size the run stops
            once every node is selected.
        lazy:
            Use CELF lazy evaluation (same output, fewer evaluations).
        processes:
            Worker processes used to score candidates. None or 1 runs inline.
        show_progress:
            Show a tqdm progress bar per round.

    Returns:
        GreedyResult with the selection order, spread and gain of every round.

    Raises:
        EmptyCascadeSetError: if there are no cascades.
        ValueError: if k is negative or not an integer, or processes < 1.
    """
    if len(cascades) == 0:
        raise EmptyCascadeSetError("Greedy selection needs at least one cascade.")
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"k must be an integer, got {k!r}")
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    if processes is not None and processes < 1:
        raise ValueError(f"processes must be >= 1, got {processes}")

    if k == 0:
        return GreedyResult()

    universe = sorted(set(node_universe))
    adjacencies = [build_adjacency(c) for c in cascades]
    run = _lazy_greedy if lazy else _plain_greedy

    if processes is None or processes == 1:
        return run(adjacencies, universe, k, None, 1, show_progress)

    with mp.Pool(processes=processes, initializer=_init_worker, initargs=(adjacencies,)) as pool:
        return run(adjacencies, universe, k, pool, processes, show_progress)


def select_seed_set(
    cascades: Sequence[Any],
    node_universe: Iterable[Any],
    k: int,
    **kwargs,
) -> Tuple[FrozenSet[Any], float]:
    """
    Select up to k seeds greedily and return (seed_set, influence).

    Keyword arguments are passed to greedy_influence_maximization.
    """
    result = greedy_influence_maximization(cascades, node_universe, k, **kwargs)
    return result.seed_set, result.influence
