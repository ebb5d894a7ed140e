"""Django command to trigger a feed aggregator."""

import json

from django.core.management.base import BaseCommand, CommandError

from core.aggregators import AggregatorRegistry, get_aggregator
from core.aggregators.exceptions import AggregatorError
from core.aggregators.utils import cache


class Command(BaseCommand):
    help = "Run an aggregator for a site section and print the resulting items"

    def add_arguments(self, parser):
        parser.add_argument("aggregator_type", type=str, help="Aggregator type (e.g. 'thairath')")
        parser.add_argument("category", type=str, nargs="?", default="", help="Section category")
        parser.add_argument("subcategory", type=str, nargs="?", default="", help="Subcategory")
        parser.add_argument("region", type=str, nargs="?", default="", help="Region")
        parser.add_argument("--limit", type=int, help="Only print the first N items")
        parser.add_argument("--json", action="store_true", help="Print the feed as JSON")
        parser.add_argument(
            "--no-cache", action="store_true", help="Clear cached articles before running"
        )
        parser.add_argument(
            "--choices", action="store_true", help="List known sections and exit"
        )

    def handle(self, *args, **options):
        aggregator_type = options["aggregator_type"]

        try:
            aggregator_class = AggregatorRegistry.get(aggregator_type)
        except KeyError as e:
            available = ", ".join(sorted(AggregatorRegistry.get_all()))
            raise CommandError(f"{e.args[0]} (available: {available})") from e

        if options.get("choices"):
            for value, label in aggregator_class.get_identifier_choices():
                self.stdout.write(f"{value or '/':<30} {label}")
            return

        if options.get("no_cache"):
            cache.clear()

        aggregator = get_aggregator(
            aggregator_type,
            category=options.get("category") or "",
            subcategory=options.get("subcategory") or "",
            region=options.get("region") or "",
        )

        try:
            feed = aggregator.aggregate()
        except AggregatorError as e:
            raise CommandError(f"Error: {str(e)}") from e

        limit = options.get("limit")
        items = feed.items[:limit] if limit else feed.items

        if options.get("json"):
            payload = feed.model_dump(mode="json")
            payload["items"] = [item.model_dump(mode="json") for item in items]
            self.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        self.stdout.write(self.style.SUCCESS(f"{feed.title} ({feed.link})"))
        for item in items:
            self._print_item(item)
        self.stdout.write(self.style.SUCCESS(f"{len(feed.items)} items"))

    def _print_item(self, item):
        """Print one feed item."""
        date = item.pub_date.isoformat() if item.pub_date else "-"
        self.stdout.write(f"- {item.title}")
        self.stdout.write(f"  {date}  {item.link}")
        if item.author:
            self.stdout.write(f"  by {item.author}")
        if item.category:
            self.stdout.write(f"  tags: {', '.join(item.category)}")
