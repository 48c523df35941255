from cascadeim.metrics.influence_metrics import InfluenceSummary, summarize_influence
