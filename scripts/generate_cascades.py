# scripts/generate_cascades.py

"""
Generate a directory of random cascade edge lists for trying out cascadeim.

Each cascade is a random DAG: a G(n, p) graph whose edges are oriented from
the smaller to the larger node id, written as one `from to` pair per line.

Creates:
  data/cascades/cascade_{i}.txt
"""

import argparse
from pathlib import Path

import networkx as nx
from tqdm import tqdm


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def generate_cascade(n: int, p: float, seed: int) -> nx.DiGraph:
    """Random DAG on nodes 1..n."""
    G = nx.gnp_random_graph(n, p, seed=seed, directed=False)
    D = nx.DiGraph()
    D.add_edges_from((min(u, v) + 1, max(u, v) + 1) for u, v in G.edges())
    return D


def save_cascade(G: nx.DiGraph, path: Path, seed: int) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"# random cascade (seed={seed})\n")
        for u, v in sorted(G.edges()):
            f.write(f"{u} {v}\n")


def main():
    parser = argparse.ArgumentParser(description="Generate random cascade edge lists.")
    parser.add_argument("--num-cascades", type=int, default=20)
    parser.add_argument("--n", type=int, default=200, help="Nodes per cascade.")
    parser.add_argument("--p", type=float, default=0.01, help="Edge probability.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--out-dir",
        type=str,
        default=None,
        help="Output directory (default: <repo_root>/data/cascades)",
    )
    args = parser.parse_args()

    ROOT = Path(__file__).resolve().parents[1]
    out_dir = Path(args.out_dir) if args.out_dir else ROOT / "data" / "cascades"
    ensure_dir(out_dir)

    print(f"Saving {args.num_cascades} cascades under {out_dir} (n={args.n}, p={args.p})")
    for i in tqdm(range(args.num_cascades)):
        seed = args.seed + i
        G = generate_cascade(args.n, args.p, seed)
        save_cascade(G, out_dir / f"cascade_{i}.txt", seed)

    print("Done generating cascades!")


if __name__ == "__main__":
    main()
