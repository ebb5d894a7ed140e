"""
Recognition of page data shapes.

A page's __NEXT_DATA__ holds either a listing (named sub-arrays of
article summaries) or a single article, under one of several known
paths. ``locate_payload`` turns that into exactly one of ``Listing``,
``Article`` or ``Unrecognized``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Union

from ..utils.next_data import get_path


@dataclass(frozen=True)
class Listing:
    """Listing page: sub-array name -> list of article summaries."""

    items: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Article:
    """Single article page."""

    record: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Unrecognized:
    """No known shape was found."""


PagePayload = Union[Listing, Article, Unrecognized]


def _populated(value: Any) -> bool:
    return isinstance(value, dict) and bool(value)


def locate_payload(
    data: Dict[str, Any],
    listing_paths: Sequence[Sequence[str]],
    article_paths: Sequence[Sequence[str]],
) -> PagePayload:
    """
    Probe the known paths and classify the page data.

    Listing paths are tried first, then article paths, each in the
    given order. The first populated object wins.

    Args:
        data: Parsed __NEXT_DATA__ object
        listing_paths: Paths that may hold a listing items object
        article_paths: Paths that may hold a single article record

    Returns:
        Listing, Article or Unrecognized
    """
    for path in listing_paths:
        items = get_path(data, path)
        if _populated(items):
            return Listing(items=items)

    for path in article_paths:
        record = get_path(data, path)
        if _populated(record):
            return Article(record=record)

    return Unrecognized()
