import logging
import os
from typing import Iterable, List, Tuple

import networkx as nx

from cascadeim.errors import CascadeFormatError, EmptyCascadeSetError
from cascadeim.graphs.cascades import CascadeSet

logger = logging.getLogger(__name__)

COMMENT_CHARS = ("#", "%")


def parse_edge_lines(lines: Iterable[str], source: str = "<lines>") -> List[Tuple[int, int]]:
    """
    Parse an edge list: one `from to` pair of integers per line.

    Blank lines and lines starting with '#' or '%' are skipped. Tokens after
    the first two (weights, timestamps) are ignored.

    Raises:
        CascadeFormatError: a line has fewer than two tokens or a
            non-integer node id.
    """
    edges: List[Tuple[int, int]] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_CHARS):
            continue

        tokens = stripped.split()
        if len(tokens) < 2:
            raise CascadeFormatError(
                f"expected two node ids, got {stripped!r}", source, line_number
            )
        try:
            u, v = int(tokens[0]), int(tokens[1])
        except ValueError:
            raise CascadeFormatError(
                f"node ids must be integers, got {stripped!r}", source, line_number
            ) from None
        edges.append((u, v))
    return edges


def read_cascade(path: str) -> nx.DiGraph:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Cascade file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            edges = parse_edge_lines(f, source=path)
    except UnicodeDecodeError as e:
        raise CascadeFormatError(f"not a UTF-8 text file ({e.reason})", source=path) from e

    G = nx.DiGraph()
    G.add_edges_from(edges)
    return G


def load_cascades_from_dir(dir_path: str, suffix: str = ".txt") -> CascadeSet:
    """
    Load every edge-list file in a directory as one cascade.

    Files are read in sorted name order so cascade indices are stable.
    Files not ending with `suffix` are ignored.

    Args:
        dir_path: directory containing the cascade edge lists
        suffix: file name suffix of cascade files

    Returns:
        CascadeSet with the cascades, their source paths and the node universe
    """
    if not os.path.isdir(dir_path):
        raise FileNotFoundError(f"Cascade directory not found: {dir_path}")

    cascades = []
    sources = []
    for fname in sorted(os.listdir(dir_path)):
        fpath = os.path.join(dir_path, fname)
        if not fname.endswith(suffix) or not os.path.isfile(fpath):
            continue
        G = read_cascade(fpath)
        logger.debug("read %s: %d nodes, %d edges", fpath, G.number_of_nodes(), G.number_of_edges())
        cascades.append(G)
        sources.append(fpath)

    if not cascades:
        raise EmptyCascadeSetError(f"No '*{suffix}' cascade files in {dir_path}")

    cascade_set = CascadeSet(cascades, sources=sources)
    logger.info(
        "loaded %d cascades from %s (%d nodes, %d edges)",
        len(cascade_set),
        dir_path,
        len(cascade_set.universe),
        cascade_set.num_edges(),
    )
    return cascade_set
