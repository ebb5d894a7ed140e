"""Aggregator for news sites that server-render their pages with Next.js."""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

from ..base import BaseAggregator
from ..exceptions import ContentFetchError, UnrecognizedPayloadError
from ..models import FeedItem, SiteConfig
from ..utils import cache
from ..utils.dates import parse_publish_time
from ..utils.html_cleaner import build_image_block, sanitize_article_html
from ..utils.html_fetcher import fetch_html
from ..utils.next_data import extract_next_data
from .images import resolve_best_image
from .listing import assemble_listing
from .payload import Article, Listing, locate_payload
from .types import NewsRecord


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


class NextDataAggregator(BaseAggregator):
    """
    Aggregator reading the __NEXT_DATA__ blob embedded in a site's pages.

    A section page yields either a single article, emitted directly, or
    a listing. Listing entries are expanded concurrently by fetching each
    article page; any failure there falls back to the listing entry's own
    fields. Expanded items are cached per article id.
    """

    def __init__(
        self,
        config: SiteConfig,
        category: str = "",
        subcategory: str = "",
        region: str = "",
    ):
        self.config = config
        super().__init__(category, subcategory, region)
        self.page_article: Optional[NewsRecord] = None

    def get_source_url(self) -> str:
        if not self.segments:
            return self.config.base_url
        return f"{self.config.base_url}/" + "/".join(self.segments)

    def get_feed_title(self) -> str:
        if self.page_article is not None:
            return f"{self.config.name} - {self.page_article.title or 'News'}"

        section = " - ".join(_capitalize(segment) for segment in self.segments) or "News"
        return f"{self.config.name} - {section}"

    def get_article_url(self, record: NewsRecord) -> str:
        """Absolute URL of a listing entry's article page."""
        return urljoin(f"{self.config.base_url}/", record.full_path)

    def fetch_source_data(self) -> Dict[str, Any]:
        """
        Fetch the section page and return its __NEXT_DATA__ object.

        Raises:
            ContentFetchError: If the page cannot be fetched
            ParseError: If the page carries no usable __NEXT_DATA__
        """
        url = self.get_source_url()
        self.logger.info(f"Fetching {url}")

        try:
            html = fetch_html(url, headers=self.config.headers)
        except requests.RequestException as e:
            self.logger.error(f"Failed to fetch {url}: {e}")
            raise ContentFetchError(f"Failed to fetch {url}: {e}", url=url, original_error=e) from e

        return extract_next_data(html)

    def parse_to_raw_articles(self, source_data: Dict[str, Any]) -> List[NewsRecord]:
        """
        Classify the page data and return the article records it holds.

        Raises:
            UnrecognizedPayloadError: If the page data matches no known shape
        """
        self.page_article = None
        payload = locate_payload(
            source_data, self.config.listing_paths, self.config.article_paths
        )

        if isinstance(payload, Article):
            self.page_article = NewsRecord(payload.record)
            self.logger.info(f"Page is a single article: {self.page_article.title!r}")
            return [self.page_article]

        if isinstance(payload, Listing):
            return assemble_listing(payload, self.config.listing_keys, self.config.item_cap)

        self.logger.error(f"Unrecognized page data at {self.get_source_url()}")
        raise UnrecognizedPayloadError(self.get_source_url())

    def filter_articles(self, articles: List[NewsRecord]) -> List[NewsRecord]:
        """Drop listing entries that have no article path to link to."""
        if self.page_article is not None:
            return articles

        filtered = []
        for record in articles:
            if not record.full_path:
                self.logger.debug(f"Skipping entry without path: {record!r}")
                continue
            filtered.append(record)
        return filtered

    def enrich_articles(self, articles: List[NewsRecord]) -> List[Optional[FeedItem]]:
        """
        Expand every record into a feed item.

        All article pages are fetched at once; results keep input order.
        """
        if self.page_article is not None:
            return [self.build_item(self.page_article, self.get_source_url())]

        if not articles:
            return []

        max_workers = self.config.max_workers or len(articles)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.enrich_article, articles))

    def enrich_article(self, record: NewsRecord) -> Optional[FeedItem]:
        """Return the cached item for a listing entry, building it on a miss."""
        key = f"{self.config.namespace}:{record.id}"
        return cache.try_get(key, lambda: self.fetch_article_item(record))

    def fetch_article_item(self, record: NewsRecord) -> Optional[FeedItem]:
        """
        Build an item from the entry's article page.

        Falls back to the listing entry's own fields if the page cannot be
        fetched or parsed, or does not hold a recognizable article.
        """
        url = self.get_article_url(record)

        try:
            html = fetch_html(url, headers=self.config.headers)
            data = extract_next_data(html)
            payload = locate_payload(data, (), self.config.detail_article_paths)

            if isinstance(payload, Article):
                item = self.build_item(NewsRecord(payload.record), url)
                if item is not None:
                    return item

            self.logger.info(f"No article data at {url}, using listing entry")

        except Exception as e:
            self.logger.warning(f"Failed to fetch article {url}, using listing entry: {e}")

        return self.build_item(record, url)

    def build_item(self, record: NewsRecord, link: str) -> Optional[FeedItem]:
        """
        Render a record as a feed item.

        Returns None if the record has no title.
        """
        if not record.title:
            self.logger.warning(f"Article at {link} has no title")
            return None

        image_url = resolve_best_image(record.data)
        image_html = build_image_block(image_url, record.title)
        body = sanitize_article_html(record.content) or record.abstract or ""

        return FeedItem(
            title=record.title,
            description=f"{image_html}{body}",
            pub_date=parse_publish_time(record.publish_time, self.config.timezone),
            link=link,
            author=record.author,
            category=record.tags,
        )
