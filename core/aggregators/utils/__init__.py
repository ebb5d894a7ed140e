"""Utility modules for aggregators."""

from .dates import parse_publish_time
from .html_cleaner import (
    build_image_block,
    build_img_tag,
    collapse_picture_elements,
    enforce_referrer_policy,
    sanitize_article_html,
)
from .html_fetcher import fetch_html
from .next_data import extract_next_data, get_path

__all__ = [
    "fetch_html",
    "extract_next_data",
    "get_path",
    "parse_publish_time",
    "sanitize_article_html",
    "collapse_picture_elements",
    "enforce_referrer_policy",
    "build_img_tag",
    "build_image_block",
]
