from .aggregator import THAIRATH_CONFIG, ThairathAggregator

__all__ = ["THAIRATH_CONFIG", "ThairathAggregator"]
