# src/cascadeim/reporting.py

"""Console output of a run."""

from typing import Any, Iterable

from cascadeim.metrics.influence_metrics import InfluenceSummary


def format_seed_set(seeds: Iterable[Any]) -> str:
    """Render seeds as `{1, 2, 3}` in ascending order (`{}` when empty)."""
    return "{" + ", ".join(str(s) for s in sorted(seeds)) + "}"


def format_influence(value: float) -> str:
    return f"{value:.6f}"


def report_reading() -> None:
    print("\nREADING CASCADES...")


def report_cascades_loaded(num_cascades: int) -> None:
    print(f"\nCASCADES READ! NUMBER OF CASCADES: {num_cascades}")


def report_start() -> None:
    print("\nRUNNING GREEDY ALGORITHM...")


def report_finish() -> None:
    print("\nGREEDY ALGORITHM FINISHED!")


def report_result(seed_set: Iterable[Any], influence: float) -> None:
    seed_set = list(seed_set)
    print(f"\nAPPROXIMATELY OPTIMAL SET (SIZE {len(seed_set)}): {format_seed_set(seed_set)}")
    print(f"\nINFLUENCE OF APPROX. OPTIMAL SET (NUMBER OF NODES): {format_influence(influence)}")


def report_elapsed(seconds: float) -> None:
    print(f"\nTIME (SEC): {seconds:.3f}\n")


def report_summary(summary: InfluenceSummary, top: int = 10) -> None:
    print(
        f"\nREACH PER CASCADE: mean={format_influence(summary.expected_spread)} "
        f"std={summary.std:.3f} min={summary.min} max={summary.max}"
    )
    print(f"\nCASCADE DEPTH FROM SEEDS: mean={summary.depths.mean():.3f} max={summary.max_depth}")
    print(f"\nMOST FREQUENTLY REACHED NODES (TOP {top}):")
    for node, prob in summary.top_nodes(top):
        print(f"  {node}: {prob:.3f}")
