# src/cascadeim/cli.py

"""
Command line entry point:

    cascadeim /path/to/cascades -k 5 [--lazy] [--processes 4] [--summary]

Reads every cascade edge list in the directory, runs the greedy algorithm
and prints the selected seed set, its influence and the elapsed time.
"""

import argparse
import logging
import sys
import time

from cascadeim.config import RunConfig
from cascadeim.errors import CascadeIMError
from cascadeim.graphs.io import load_cascades_from_dir
from cascadeim.metrics.influence_metrics import summarize_influence
from cascadeim import reporting
from cascadeim.selection.greedy import greedy_influence_maximization

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cascadeim",
        description="Greedy influence maximization over a directory of cascade edge lists.",
    )
    parser.add_argument("cascade_dir", help="Directory with one edge-list file per cascade.")
    parser.add_argument("-k", "--k", type=int, default=1, help="Number of seed nodes to select.")
    parser.add_argument("--suffix", default=".txt", help="File name suffix of cascade files.")
    parser.add_argument("--lazy", action="store_true", help="Use CELF lazy evaluation.")
    parser.add_argument("--processes", type=int, default=None, help="Worker processes for candidate scoring.")
    parser.add_argument("--progress", action="store_true", help="Show progress bars.")
    parser.add_argument("--summary", action="store_true", help="Print per-node reach statistics.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
    )
    return parser


def run(config: RunConfig) -> int:
    reporting.report_reading()
    cascades = load_cascades_from_dir(str(config.cascade_dir), suffix=config.suffix)
    reporting.report_cascades_loaded(len(cascades))

    reporting.report_start()
    start = time.perf_counter()

    result = greedy_influence_maximization(
        cascades,
        cascades.universe,
        config.k,
        lazy=config.lazy,
        processes=config.processes,
        show_progress=config.show_progress,
    )

    reporting.report_finish()
    reporting.report_result(result.seed_set, result.influence)

    if config.summary:
        reporting.report_summary(summarize_influence(cascades, result.seed_set))

    reporting.report_elapsed(time.perf_counter() - start)
    logger.info("%d influence evaluations", result.evaluations)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig.from_args(args).validate()
        return run(config)
    except (CascadeIMError, FileNotFoundError) as e:
        print(f"cascadeim: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
