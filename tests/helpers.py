import random

import networkx as nx


def example_cascades():
    """Four cascades in which node 1 is the best single seed (influence 2.0)."""
    return [
        {1: [2], 2: [3, 4]},
        {5: [6]},
        {1: [7]},
        {8: [9]},
    ]


def random_dag_cascades(num_cascades=6, num_nodes=25, num_edges=30, seed=7):
    rng = random.Random(seed)
    cascades = []
    for _ in range(num_cascades):
        G = nx.DiGraph()
        for _ in range(num_edges):
            u, v = sorted(rng.sample(range(1, num_nodes + 1), 2))
            G.add_edge(u, v)
        cascades.append(G)
    return cascades
