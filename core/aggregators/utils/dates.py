"""Publish time parsing."""

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from django.utils import timezone
from django.utils.dateparse import parse_datetime

logger = logging.getLogger(__name__)


def parse_publish_time(value: Optional[str], tz_name: str = "UTC") -> Optional[datetime]:
    """
    Parse a publish timestamp from page data.

    Accepts ISO-8601 strings with or without an offset. Naive values are
    interpreted in the site's local timezone.

    Args:
        value: Timestamp string (may be empty or None)
        tz_name: IANA timezone name used for naive timestamps

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if not value or not isinstance(value, str):
        return None

    try:
        parsed = parse_datetime(value.strip())
    except ValueError:
        parsed = None

    if parsed is None:
        logger.debug(f"Could not parse publish time: {value!r}")
        return None

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, ZoneInfo(tz_name))

    return parsed
