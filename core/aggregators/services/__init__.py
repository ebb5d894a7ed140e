"""
Aggregator services - Business logic layer.

Contains shared configuration for aggregators.
"""
