from cascadeim.graphs.cascades import CascadeSet, build_adjacency, node_universe
from cascadeim.graphs.io import load_cascades_from_dir, parse_edge_lines, read_cascade
