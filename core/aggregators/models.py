"""
Pydantic models for aggregator data structures.

This module defines the data models shared by the aggregation pipeline:
- FeedItem: One normalized article ready for rendering
- Feed: An aggregated feed (title, link, ordered items)
- SiteConfig: Per-site configuration for Next.js based news sites
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeedItem(BaseModel):
    """
    A normalized feed entry.

    Attributes:
        title: Article title (never empty)
        description: HTML body (optional leading image + sanitized content)
        pub_date: Publication date, None if the source value was unparseable
        link: Absolute article URL
        author: Credit line or source attribution
        category: Article tags
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    pub_date: Optional[datetime] = None
    link: str
    author: Optional[str] = None
    category: Optional[List[str]] = None

    @field_validator("title", "link")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty titles and links."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class Feed(BaseModel):
    """An aggregated feed."""

    title: str
    link: str
    items: List[FeedItem] = Field(default_factory=list)


class SiteConfig(BaseModel):
    """
    Configuration for a news site that embeds its page state as __NEXT_DATA__.

    Attributes:
        name: Display name used in feed titles
        namespace: Prefix for cache keys
        base_url: Site root without trailing slash
        headers: Request headers sent with every page fetch
        listing_keys: Sub-array names merged into the listing, in feed order
        item_cap: Maximum number of listing entries expanded per run
        listing_paths: JSON paths probed for a listing object, in order
        article_paths: JSON paths probed for a single article, in order
        detail_article_paths: JSON paths probed on per-article pages
        timezone: IANA zone for timestamps without an offset
        max_workers: Thread count for article fetches (None = one per article)
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    base_url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    listing_keys: Tuple[str, ...] = ()
    item_cap: int = Field(default=50, ge=1)
    listing_paths: Tuple[Tuple[str, ...], ...] = ()
    article_paths: Tuple[Tuple[str, ...], ...] = ()
    detail_article_paths: Tuple[Tuple[str, ...], ...] = ()
    timezone: str = "UTC"
    max_workers: Optional[int] = Field(default=None, ge=1)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        return v.rstrip("/")
