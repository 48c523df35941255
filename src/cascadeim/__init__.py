"""Greedy influence maximization over sampled cascades."""

from cascadeim.diffusion import estimate_influence, reachable_count
from cascadeim.errors import (
    CascadeFormatError,
    CascadeIMError,
    ConfigError,
    EmptyCascadeSetError,
)
from cascadeim.graphs import CascadeSet, load_cascades_from_dir, node_universe
from cascadeim.selection import GreedyResult, greedy_influence_maximization, select_seed_set

__version__ = "0.1.0"

__all__ = [
    "CascadeFormatError",
    "CascadeIMError",
    "CascadeSet",
    "ConfigError",
    "EmptyCascadeSetError",
    "GreedyResult",
    "estimate_influence",
    "greedy_influence_maximization",
    "load_cascades_from_dir",
    "node_universe",
    "reachable_count",
    "select_seed_set",
]
