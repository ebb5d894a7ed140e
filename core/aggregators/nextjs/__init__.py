"""Aggregation for news sites that embed their page state as __NEXT_DATA__."""

from .aggregator import NextDataAggregator
from .images import resolve_best_image
from .listing import assemble_listing
from .payload import Article, Listing, PagePayload, Unrecognized, locate_payload
from .types import NewsRecord

__all__ = [
    "NextDataAggregator",
    "NewsRecord",
    "resolve_best_image",
    "assemble_listing",
    "locate_payload",
    "PagePayload",
    "Listing",
    "Article",
    "Unrecognized",
]
