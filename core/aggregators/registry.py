"""
Aggregator registry to map feed types to aggregator classes.
"""

from typing import Dict, Type

from .base import BaseAggregator
from .thairath import ThairathAggregator


class AggregatorRegistry:
    """Registry for aggregator classes."""

    _registry: Dict[str, Type[BaseAggregator]] = {
        "thairath": ThairathAggregator,
    }

    @classmethod
    def get(cls, aggregator_type: str) -> Type[BaseAggregator]:
        """
        Get aggregator class for the given type.

        Args:
            aggregator_type: The aggregator type string (e.g., 'thairath')

        Returns:
            Aggregator class

        Raises:
            KeyError: If aggregator type is not found
        """
        if aggregator_type not in cls._registry:
            raise KeyError(f"Unknown aggregator type: {aggregator_type}")
        return cls._registry[aggregator_type]

    @classmethod
    def get_all(cls) -> Dict[str, Type[BaseAggregator]]:
        """Get all registered aggregators."""
        return cls._registry.copy()


def get_aggregator(
    aggregator_type: str, category: str = "", subcategory: str = "", region: str = ""
) -> BaseAggregator:
    """
    Get aggregator instance for a section of a source.

    Args:
        aggregator_type: Registered aggregator type
        category: Top-level section (optional)
        subcategory: Section below category (optional)
        region: Section below subcategory (optional)

    Returns:
        Instantiated aggregator
    """
    aggregator_class = AggregatorRegistry.get(aggregator_type)
    return aggregator_class(category=category, subcategory=subcategory, region=region)
