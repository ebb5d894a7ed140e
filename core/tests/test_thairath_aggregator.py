import threading
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
import requests
from bs4 import BeautifulSoup

from core.aggregators.exceptions import (
    ContentFetchError,
    ParseError,
    UnrecognizedPayloadError,
    ValidationError,
)
from core.aggregators.nextjs.types import NewsRecord
from core.aggregators.thairath.aggregator import HEADERS, THAIRATH_CONFIG, ThairathAggregator
from core.tests.conftest import article_data, listing_data, make_page

BASE = "https://www.thairath.co.th"
FETCH = "core.aggregators.nextjs.aggregator.fetch_html"


class FakeSite:
    """Serves canned pages by URL and counts requests."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def __call__(self, url, headers=None, **kwargs):
        self.calls.append(url)
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            raise requests.HTTPError(f"404 Client Error for url: {url}")
        return page


class TestSectionUrlAndTitle:
    def test_homepage(self):
        agg = ThairathAggregator()

        assert agg.get_source_url() == BASE
        assert agg.get_feed_title() == "Thairath - News"

    def test_nested_sections(self):
        agg = ThairathAggregator("news", "local", "bangkok")

        assert agg.get_source_url() == f"{BASE}/news/local/bangkok"
        assert agg.get_feed_title() == "Thairath - News - Local - Bangkok"

    def test_capitalizes_first_letter_only(self):
        agg = ThairathAggregator("entertainment", "kDrama")

        assert agg.get_feed_title() == "Thairath - Entertainment - KDrama"

    def test_later_segment_without_parent_is_rejected(self):
        agg = ThairathAggregator(category="", subcategory="local")

        with pytest.raises(ValidationError):
            agg.validate()

    def test_segment_with_slash_is_rejected(self):
        with pytest.raises(ValidationError):
            ThairathAggregator("news/local").validate()

    def test_config_defaults(self):
        assert THAIRATH_CONFIG.item_cap == 50
        assert THAIRATH_CONFIG.headers == HEADERS
        assert THAIRATH_CONFIG.headers["referer"] == f"{BASE}/"

    def test_identifier_choices(self):
        choices = ThairathAggregator.get_identifier_choices()

        assert ("news/local", "Local News") in choices


class TestAggregateListing:
    @pytest.fixture
    def listing_url(self):
        return f"{BASE}/news/local"

    def test_enriches_every_entry_in_order(self, listing_url, summary, detail):
        second = {"id": 202, "title": "Second story", "fullPath": "/news/local/202"}
        site = FakeSite(
            {
                listing_url: make_page(
                    listing_data({"highlight": [summary], "popular": [summary, second]})
                ),
                f"{BASE}/news/local/north/101": make_page(article_data(detail)),
                f"{BASE}/news/local/202": make_page(
                    article_data({"id": 202, "title": "Second story full", "content": "<p>B</p>"})
                ),
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.title == "Thairath - News - Local"
        assert feed.link == listing_url
        assert [item.title for item in feed.items] == [
            "Flooding in Chiang Mai worsens",
            "Second story full",
        ]

        first = feed.items[0]
        assert first.link == f"{BASE}/news/local/north/101"
        assert first.author == "Reporter A"
        assert first.category == ["flood"]
        assert first.description.startswith(
            '<p><img src="https://static.example.com/101-share.jpg" '
            'alt="Flooding in Chiang Mai worsens" referrerpolicy="no-referrer" /></p>'
        )
        assert "<picture>" not in first.description
        assert "<figure>" in first.description
        assert "The Ping river" not in first.description
        # Naive timestamps are Bangkok time
        assert first.pub_date == datetime(2024, 9, 25, 8, 30, tzinfo=timezone.utc)

        assert feed.items[1].description == "<p>B</p>"

    def test_headers_are_sent_with_every_request(self, listing_url, summary):
        site = FakeSite({listing_url: make_page(listing_data({"highlight": [summary]}))})

        with patch(FETCH, side_effect=site) as mock_fetch:
            ThairathAggregator("news", "local").aggregate()

        for call in mock_fetch.call_args_list:
            assert call.kwargs["headers"] == HEADERS

    def test_detail_fetch_failure_falls_back_to_summary(self, listing_url, summary):
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": requests.ConnectionError("connection reset"),
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        (item,) = feed.items
        assert item.title == "Flooding in Chiang Mai"
        assert item.description == (
            '<p><img src="https://static.example.com/101-square.jpg" '
            'alt="Flooding in Chiang Mai" referrerpolicy="no-referrer" /></p>'
            "Heavy rain floods the old city."
        )
        assert item.link == f"{BASE}/news/local/north/101"
        assert item.author == "Thairath Online"
        assert item.category == ["flood", "chiang mai"]
        assert item.pub_date == datetime(2024, 9, 25, 8, 30, tzinfo=timezone.utc)

    def test_detail_page_without_article_falls_back(self, listing_url, summary):
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": make_page({"props": {"pageProps": {}}}),
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.items[0].title == "Flooding in Chiang Mai"

    def test_detail_page_without_next_data_falls_back(self, listing_url, summary):
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": "<html>Maintenance</html>",
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.items[0].title == "Flooding in Chiang Mai"

    def test_detail_page_with_listing_is_treated_as_unrecognized(self, listing_url, summary):
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": make_page(
                    listing_data({"highlight": [{"id": 5, "title": "Other"}]})
                ),
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.items[0].title == "Flooding in Chiang Mai"

    def test_legacy_detail_shape(self, listing_url, summary, detail):
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": make_page(article_data(detail, legacy=True)),
            }
        )

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.items[0].title == "Flooding in Chiang Mai worsens"

    def test_fallback_body_is_sanitized(self, listing_url):
        entry = {
            "id": 7,
            "title": "Gallery",
            "fullPath": "/news/7",
            "content": "<picture><img src='p.jpg' alt='P'></picture>",
            "abstract": "unused",
        }
        site = FakeSite({listing_url: make_page(listing_data({"highlight": [entry]}))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        soup = BeautifulSoup(feed.items[0].description, "html.parser")
        imgs = soup.find_all("img")

        assert soup.find("picture") is None
        assert len(imgs) == 1
        assert imgs[0]["src"] == "p.jpg"
        assert imgs[0]["alt"] == "P"
        assert imgs[0]["referrerpolicy"] == "no-referrer"
        assert "unused" not in feed.items[0].description

    def test_entries_without_title_or_path_are_dropped(self, listing_url, summary):
        entries = [{"id": 1, "fullPath": "/news/1"}, {"id": 2, "title": "No path"}, summary]
        site = FakeSite({listing_url: make_page(listing_data({"highlight": entries}))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert [item.title for item in feed.items] == ["Flooding in Chiang Mai"]

    def test_cap_limits_fetches(self, listing_url):
        entries = [{"id": i, "title": f"Story {i}", "fullPath": f"/news/{i}"} for i in range(60)]
        site = FakeSite({listing_url: make_page(listing_data({"lastestNews": entries}))})
        config = THAIRATH_CONFIG.model_copy(update={"item_cap": 15})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local", config=config).aggregate()

        assert [item.title for item in feed.items] == [f"Story {i}" for i in range(15)]
        assert len(site.calls) == 16

    def test_article_fetches_are_in_flight_together(self, listing_url):
        entries = [{"id": i, "title": f"Story {i}", "fullPath": f"/news/{i}"} for i in range(5)]
        listing_page = make_page(listing_data({"highlight": entries}))
        # Serial fetching would leave the first caller waiting until the timeout
        barrier = threading.Barrier(len(entries), timeout=5)
        broken = []

        def fetch(url, headers=None, **kwargs):
            if url == listing_url:
                return listing_page
            try:
                barrier.wait()
            except threading.BrokenBarrierError:
                broken.append(url)
                raise
            article_id = int(url.rsplit("/", 1)[1])
            if article_id == 3:
                raise requests.ConnectionError("Connection reset")
            record = {"id": article_id, "title": f"Full story {article_id}"}
            return make_page(article_data(record))

        with patch(FETCH, side_effect=fetch):
            feed = ThairathAggregator("news", "local").aggregate()

        assert broken == []
        assert [item.title for item in feed.items] == [
            "Full story 0",
            "Full story 1",
            "Full story 2",
            "Story 3",
            "Full story 4",
        ]

    def test_empty_listing_produces_empty_feed(self, listing_url):
        site = FakeSite({listing_url: make_page(listing_data({"highlight": [], "pr": [{}]}))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local").aggregate()

        assert feed.items == []
        assert feed.title == "Thairath - News - Local"


class TestArticleCache:
    def test_cached_item_is_reused_without_fetching(self, summary, detail):
        agg = ThairathAggregator("news")
        record = NewsRecord(summary)
        site = FakeSite({f"{BASE}/news/local/north/101": make_page(article_data(detail))})

        with patch(FETCH, side_effect=site):
            first = agg.enrich_article(record)
            second = agg.enrich_article(record)

        assert first == second
        assert first.title == "Flooding in Chiang Mai worsens"
        assert len(site.calls) == 1

    def test_fallback_items_are_cached_too(self, summary):
        agg = ThairathAggregator("news")
        record = NewsRecord(summary)
        site = FakeSite({})

        with patch(FETCH, side_effect=site):
            first = agg.enrich_article(record)
            second = agg.enrich_article(record)

        assert first.title == "Flooding in Chiang Mai"
        assert first == second
        assert len(site.calls) == 1

    def test_cache_shared_across_runs(self, summary, detail):
        listing_url = f"{BASE}/news"
        site = FakeSite(
            {
                listing_url: make_page(listing_data({"highlight": [summary]})),
                f"{BASE}/news/local/north/101": make_page(article_data(detail)),
            }
        )

        with patch(FETCH, side_effect=site):
            first = ThairathAggregator("news").aggregate()
            second = ThairathAggregator("news").aggregate()

        assert first.items == second.items
        assert site.calls.count(f"{BASE}/news/local/north/101") == 1
        assert site.calls.count(listing_url) == 2

    def test_enrich_article_never_raises(self, summary):
        agg = ThairathAggregator("news")

        with patch(FETCH, side_effect=RuntimeError("boom")):
            item = agg.enrich_article(NewsRecord(summary))

        assert item.title == "Flooding in Chiang Mai"


class TestAggregateSingleArticle:
    def test_article_page_yields_one_item(self, detail):
        url = f"{BASE}/news/local/north"
        site = FakeSite({url: make_page(article_data(detail))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local", "north").aggregate()

        assert len(feed.items) == 1
        assert feed.items[0].link == url
        assert feed.link == url
        assert feed.title == "Thairath - Flooding in Chiang Mai worsens"
        assert len(site.calls) == 1

    def test_legacy_article_page(self, detail):
        url = f"{BASE}/news/local/north"
        site = FakeSite({url: make_page(article_data(detail, legacy=True))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local", "north").aggregate()

        assert [item.link for item in feed.items] == [url]
        assert "referrerpolicy" in feed.items[0].description

    def test_untitled_article_page_yields_empty_feed(self, detail):
        url = f"{BASE}/news/local/north"
        detail["title"] = ""
        site = FakeSite({url: make_page(article_data(detail))})

        with patch(FETCH, side_effect=site):
            feed = ThairathAggregator("news", "local", "north").aggregate()

        assert feed.items == []
        assert feed.title == "Thairath - News"
        assert feed.link == url


class TestAggregateErrors:
    def test_unrecognized_payload_is_fatal(self):
        site = FakeSite({BASE: make_page({"props": {"initialState": {}}})})

        with patch(FETCH, side_effect=site):
            with pytest.raises(UnrecognizedPayloadError):
                ThairathAggregator().aggregate()

    def test_missing_next_data_is_fatal(self):
        site = FakeSite({BASE: "<html><body>Blocked</body></html>"})

        with patch(FETCH, side_effect=site):
            with pytest.raises(ParseError, match="Could not find __NEXT_DATA__"):
                ThairathAggregator().aggregate()

    def test_top_level_fetch_failure(self):
        site = FakeSite({BASE: requests.Timeout("timed out")})

        with patch(FETCH, side_effect=site):
            with pytest.raises(ContentFetchError) as exc_info:
                ThairathAggregator().aggregate()

        assert exc_info.value.url == BASE
        assert isinstance(exc_info.value.original_error, requests.Timeout)
