"""
RSS feed syndication classes.
"""

import logging

from django.contrib.syndication.views import Feed as DjangoFeed
from django.http import Http404, HttpResponse
from django.utils.feedgenerator import Rss201rev2Feed

from core.aggregators import get_aggregator
from core.aggregators.exceptions import AggregatorError, ValidationError
from core.aggregators.models import Feed, FeedItem

logger = logging.getLogger(__name__)


class AggregatedFeed(DjangoFeed):
    """
    RSS feed generated live from an aggregator.

    Accessible via /<aggregator_type>/[<category>/[<subcategory>/[<region>/]]]
    """

    feed_type = Rss201rev2Feed
    description = ""

    def __call__(self, request, *args, **kwargs):
        """
        Render the feed, mapping aggregation failures to 502 responses.
        """
        try:
            return super().__call__(request, *args, **kwargs)
        except ValidationError as e:
            raise Http404(str(e)) from e
        except AggregatorError as e:
            logger.error(f"Aggregation failed for {request.path}: {e}")
            return HttpResponse(
                f"Source fetch failed: {e}", status=502, content_type="text/plain"
            )

    def get_object(self, request, aggregator_type, **kwargs) -> Feed:
        """
        Run the aggregator for the requested section.

        Raises:
            Http404: If the aggregator type is unknown
        """
        try:
            aggregator = get_aggregator(
                aggregator_type,
                category=kwargs.get("category", ""),
                subcategory=kwargs.get("subcategory", ""),
                region=kwargs.get("region", ""),
            )
        except KeyError as e:
            raise Http404(f"Unknown aggregator type: {aggregator_type}") from e

        logger.info(f"Generating RSS feed for {aggregator.get_source_url()}")
        return aggregator.aggregate()

    def title(self, obj: Feed) -> str:
        return obj.title

    def link(self, obj: Feed) -> str:
        return obj.link

    def items(self, obj: Feed) -> list:
        return obj.items

    def item_title(self, item: FeedItem) -> str:
        return item.title

    def item_description(self, item: FeedItem) -> str:
        return item.description

    def item_link(self, item: FeedItem) -> str:
        return item.link

    def item_guid(self, item: FeedItem) -> str:
        return item.link

    def item_pubdate(self, item: FeedItem):
        return item.pub_date

    def item_author_name(self, item: FeedItem):
        return item.author

    def item_categories(self, item: FeedItem):
        return item.category or ()
