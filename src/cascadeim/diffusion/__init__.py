from cascadeim.diffusion.influence import estimate_influence, per_cascade_counts
from cascadeim.diffusion.reachability import hop_layers, reachable_count, reachable_set
