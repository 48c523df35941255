# src/cascadeim/metrics/influence_metrics.py

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from cascadeim.diffusion.reachability import hop_layers
from cascadeim.errors import EmptyCascadeSetError


# ---------------------------------------------------------------------------
# Influence summaries
# ---------------------------------------------------------------------------


@dataclass
class InfluenceSummary:
    """
    Collapsed view of a seed set's reach over every cascade.

    Attributes:
        activation_prob:
            Mapping node -> fraction of cascades in which the node is
            reached from the seed set.

        expected_spread:
            Expected number of reached nodes:
                expected_spread = sum_v activation_prob[v]
            This equals the influence of the seed set.

        per_cascade:
            Reachable count in each cascade (numpy int array, cascade order).

        depths:
            Hops from the seeds to the farthest reached node in each cascade
            (0 when only the seeds themselves are reached).
    """

    activation_prob: Dict[Any, float]
    expected_spread: float
    per_cascade: np.ndarray
    depths: np.ndarray

    @property
    def std(self) -> float:
        return float(self.per_cascade.std()) if self.per_cascade.size else 0.0

    @property
    def min(self) -> int:
        return int(self.per_cascade.min()) if self.per_cascade.size else 0

    @property
    def max(self) -> int:
        return int(self.per_cascade.max()) if self.per_cascade.size else 0

    @property
    def max_depth(self) -> int:
        return int(self.depths.max()) if self.depths.size else 0

    def top_nodes(self, n: int = 10) -> List[Tuple[Any, float]]:
        """The n most frequently reached nodes, ties by ascending node id."""
        ranked = sorted(self.activation_prob.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]


def summarize_influence(
    cascades: Sequence[Any],
    seed_set: Iterable[Any],
    all_nodes: Optional[Iterable[Any]] = None,
) -> InfluenceSummary:
    """
    Reach of `seed_set` in every cascade, collapsed into per-node activation
    fractions and spread statistics.

    Args:
        cascades:
            Cascades (or a CascadeSet).
        seed_set:
            Seed nodes.
        all_nodes:
            Nodes to report even if no cascade reaches them (listed with
            fraction 0.0), typically the node universe. Without it the
            summary covers only nodes reached in at least one cascade.

    Returns:
        InfluenceSummary
    """
    if len(cascades) == 0:
        raise EmptyCascadeSetError("summarize_influence: no cascades.")

    seed_set = set(seed_set)
    node_set: Set[Any] = set(all_nodes) if all_nodes is not None else set()

    # Count in how many cascades each node was reached.
    counts: Dict[Any, int] = {v: 0 for v in node_set}
    sizes = []
    depths = []
    for cascade in cascades:
        layers = hop_layers(cascade, seed_set)
        depths.append(max(len(layers) - 1, 0))
        reached = 0
        for layer in layers:
            reached += len(layer)
            for v in layer:
                counts[v] = counts.get(v, 0) + 1
        sizes.append(reached)

    num_cascades = len(cascades)
    activation_prob: Dict[Any, float] = {v: c / num_cascades for v, c in counts.items()}
    per_cascade = np.asarray(sizes, dtype=np.int64)

    return InfluenceSummary(
        activation_prob=activation_prob,
        expected_spread=float(per_cascade.sum()) / num_cascades,
        per_cascade=per_cascade,
        depths=np.asarray(depths, dtype=np.int64),
    )
