# src/cascadeim/graphs/cascades.py

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import networkx as nx


def node_universe(cascades: Iterable[Any]) -> List[int]:
    """
    Union of all nodes across cascades, in ascending order.

    Works for networkx graphs and for plain adjacency mappings (where a node
    can appear only as a target).
    """
    nodes = set()
    for cascade in cascades:
        if isinstance(cascade, nx.Graph):
            nodes.update(cascade.nodes())
        else:
            for u, nbrs in cascade.items():
                nbrs = list(nbrs)
                if nbrs:
                    nodes.add(u)
                    nodes.update(nbrs)
    return sorted(nodes)


def build_adjacency(cascade) -> Dict[Any, List[Any]]:
    """
    Convert a cascade to a lightweight adjacency dict: node -> list(out-neighbors).

    Nodes without outgoing edges are left out; the traversal treats a
    missing key as an empty neighbor list.
    """
    if isinstance(cascade, nx.Graph):
        out_neighbors = cascade.succ if cascade.is_directed() else cascade.adj
        return {u: list(nbrs) for u, nbrs in out_neighbors.items() if nbrs}
    return {u: list(nbrs) for u, nbrs in cascade.items() if nbrs}


@dataclass
class CascadeSet:
    """
    All cascades of one dataset plus their shared node universe.

    Attributes:
        cascades: cascade graphs, indexed 0..N-1 in load order.
        sources: where each cascade came from (file path), same order.
        universe: every node appearing in any cascade, ascending.
    """

    cascades: List[nx.DiGraph]
    sources: List[str] = field(default_factory=list)
    universe: Optional[List[int]] = None

    def __post_init__(self):
        self.cascades = list(self.cascades)
        if self.universe is None:
            self.universe = node_universe(self.cascades)

    def __len__(self) -> int:
        return len(self.cascades)

    def __iter__(self):
        return iter(self.cascades)

    def __getitem__(self, index: int):
        return self.cascades[index]

    def num_edges(self) -> int:
        return sum(_edge_count(c) for c in self.cascades)

    @classmethod
    def from_adjacency(
        cls,
        adjacencies: Sequence[Mapping[int, Iterable[int]]],
        sources: Optional[Sequence[str]] = None,
    ) -> "CascadeSet":
        """Build DiGraph cascades from node -> out-neighbors mappings (edges only)."""
        graphs = []
        for adj in adjacencies:
            G = nx.DiGraph()
            for u, nbrs in adj.items():
                G.add_edges_from((u, v) for v in nbrs)
            graphs.append(G)
        return cls(graphs, sources=list(sources) if sources is not None else [])


def _edge_count(cascade) -> int:
    if isinstance(cascade, nx.Graph):
        return cascade.number_of_edges()
    return sum(len(nbrs) for nbrs in cascade.values())
