"""Thairath aggregator implementation."""

from typing import List, Optional, Tuple

from ..models import SiteConfig
from ..nextjs import NextDataAggregator
from ..services.config import DEFAULT_ITEM_CAP, THAIRATH_ITEM_CAP

BASE_URL = "https://www.thairath.co.th"

# Desktop Chrome request headers
HEADERS = {
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7",
    "accept-language": "th-TH;q=0.9,th;q=0.8",
    "cache-control": "no-cache",
    "sec-ch-ua": '"Chromium";v="130", "Google Chrome";v="130", "Not?A_Brand";v="99"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"macOS"',
    "sec-fetch-dest": "document",
    "sec-fetch-mode": "navigate",
    "sec-fetch-site": "none",
    "sec-fetch-user": "?1",
    "referer": f"{BASE_URL}/",
    "upgrade-insecure-requests": "1",
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
}

# Feed order follows this list
LISTING_KEYS = (
    "highlight",
    "panorama",
    "scoop",
    "toplasted",
    "lastestNews",
    "breakingNews",
    "popular",
    "loadmore",
    "video",
    "column",
    "pr",
)

NEWS_ITEMS_PATH = ("props", "initialState", "news", "data", "items")
COMMON_ITEMS_PATH = ("props", "initialState", "common", "data", "items")
CONTENT_ITEMS_PATH = ("props", "initialState", "content", "data", "items")
PAGE_PROPS_ITEMS_PATH = ("props", "initialProps", "pageProps", "items")

THAIRATH_CONFIG = SiteConfig(
    name="Thairath",
    namespace="thairath",
    base_url=BASE_URL,
    headers=HEADERS,
    listing_keys=LISTING_KEYS,
    item_cap=THAIRATH_ITEM_CAP or DEFAULT_ITEM_CAP,
    listing_paths=(NEWS_ITEMS_PATH, COMMON_ITEMS_PATH),
    article_paths=(CONTENT_ITEMS_PATH, PAGE_PROPS_ITEMS_PATH),
    detail_article_paths=(CONTENT_ITEMS_PATH, PAGE_PROPS_ITEMS_PATH),
    timezone="Asia/Bangkok",
)


class ThairathAggregator(NextDataAggregator):
    """
    Aggregator for Thairath (thairath.co.th), a Thai news site.

    Reads the homepage or a section page (category, subcategory, region)
    and expands each listed article from its own page.
    """

    def __init__(
        self,
        category: str = "",
        subcategory: str = "",
        region: str = "",
        config: Optional[SiteConfig] = None,
    ):
        super().__init__(config or THAIRATH_CONFIG, category, subcategory, region)

    @classmethod
    def get_identifier_choices(cls) -> List[Tuple[str, str]]:
        """Get commonly used Thairath sections."""
        return [
            ("", "Homepage"),
            ("news", "News"),
            ("news/local", "Local News"),
            ("news/local/bangkok", "Local News - Bangkok"),
            ("news/local/north", "Local News - North"),
            ("news/local/northeast", "Local News - Northeast"),
            ("news/local/south", "Local News - South"),
            ("news/crime", "Crime"),
            ("news/politic", "Politics"),
            ("sport", "Sport"),
            ("entertainment", "Entertainment"),
            ("tv", "TV"),
            ("world", "World"),
        ]
