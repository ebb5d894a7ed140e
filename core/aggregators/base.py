"""Base aggregator class for implementing feed providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .exceptions import ValidationError
from .models import Feed, FeedItem


class BaseAggregator(ABC):
    """Base class for all aggregators using Template Method pattern."""

    def __init__(self, category: str = "", subcategory: str = "", region: str = ""):
        """
        Initialize aggregator with the requested section path.

        Args:
            category: Top-level section (optional)
            subcategory: Section below category (only used with a category)
            region: Section below subcategory (only used with a subcategory)
        """
        self.category = (category or "").strip()
        self.subcategory = (subcategory or "").strip()
        self.region = (region or "").strip()
        self.logger = logging.getLogger(f"aggregator.{self.get_aggregator_type()}")

    @property
    def segments(self) -> List[str]:
        """Path segments up to the first missing one."""
        segments = []
        for segment in (self.category, self.subcategory, self.region):
            if not segment:
                break
            segments.append(segment)
        return segments

    def validate(self) -> None:
        """
        Validate the requested section path.

        Raises:
            ValidationError: If a segment is given without its parent or
                contains a path separator
        """
        given = [self.category, self.subcategory, self.region]
        for index, segment in enumerate(given):
            if segment and not all(given[:index]):
                raise ValidationError(
                    f"Path segment '{segment}' requires all preceding segments"
                )
            if "/" in segment or "?" in segment or "#" in segment:
                raise ValidationError(f"Invalid path segment: '{segment}'")

    def aggregate(self) -> Feed:
        """
        Fetch and aggregate articles into a feed.

        Returns:
            Feed with items in source order
        """
        self.validate()

        source_data = self.fetch_source_data()
        articles = self.parse_to_raw_articles(source_data)
        self.logger.info(f"Parsed {len(articles)} articles from {self.get_source_url()}")

        articles = self.filter_articles(articles)
        items = self.enrich_articles(articles)
        items = self.finalize_articles(items)

        return Feed(title=self.get_feed_title(), link=self.get_source_url(), items=items)

    @abstractmethod
    def fetch_source_data(self) -> Any:
        """
        Fetch raw source data (page data, API response, etc.).

        Must be implemented by subclasses.

        Returns:
            Raw source data in implementation-specific format
        """
        pass

    @abstractmethod
    def parse_to_raw_articles(self, source_data: Any) -> List[Any]:
        """
        Parse source data to raw article records.

        Must be implemented by subclasses.

        Args:
            source_data: Raw source data from fetch_source_data()

        Returns:
            List of implementation-specific article records
        """
        pass

    def filter_articles(self, articles: List[Any]) -> List[Any]:
        """
        Filter articles based on criteria.

        Default implementation keeps everything.
        """
        return articles

    @abstractmethod
    def enrich_articles(self, articles: List[Any]) -> List[Optional[FeedItem]]:
        """
        Turn article records into feed items, fetching extra data as needed.

        Entries that cannot be rendered may be returned as None.
        """
        pass

    def finalize_articles(self, items: List[Optional[FeedItem]]) -> List[FeedItem]:
        """
        Final processing before returning items.

        Drops entries that could not be rendered.
        """
        finalized = [item for item in items if item is not None]
        dropped = len(items) - len(finalized)
        if dropped:
            self.logger.warning(f"Dropped {dropped} articles without title or link")
        return finalized

    def get_aggregator_type(self) -> str:
        """Get the aggregator type name."""
        return self.__class__.__name__.replace("Aggregator", "").lower()

    @abstractmethod
    def get_source_url(self) -> str:
        """Get the page URL this aggregator reads."""
        pass

    @abstractmethod
    def get_feed_title(self) -> str:
        """Get the title of the aggregated feed."""
        pass

    @classmethod
    def get_identifier_choices(cls) -> List[Tuple[str, str]]:
        """
        Get known section paths for this aggregator.

        Returns a list of (path, label) tuples. Empty if none are known.
        """
        return []
