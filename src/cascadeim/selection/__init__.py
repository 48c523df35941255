from cascadeim.selection.greedy import GreedyResult, greedy_influence_maximization, select_seed_set
