"""Helpers for pages that embed their state in a Next.js data script."""

import json
from typing import Any, Dict, Sequence

from bs4 import BeautifulSoup

from ..exceptions import ParseError

NEXT_DATA_SELECTOR = "script#__NEXT_DATA__"


def extract_next_data(html: str) -> Dict[str, Any]:
    """
    Extract the JSON object from a page's __NEXT_DATA__ script tag.

    Args:
        html: Raw page HTML

    Returns:
        Parsed JSON object

    Raises:
        ParseError: If the script tag is missing, empty or not a JSON object
    """
    soup = BeautifulSoup(html or "", "html.parser")
    script = soup.select_one(NEXT_DATA_SELECTOR)
    text = script.get_text() if script else ""
    if not text.strip():
        raise ParseError("Could not find __NEXT_DATA__")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid __NEXT_DATA__ JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("__NEXT_DATA__ is not a JSON object")

    return data


def get_path(data: Any, path: Sequence[str]) -> Any:
    """
    Follow a sequence of keys through nested dicts.

    Returns None as soon as a key is missing or a non-dict is reached.
    """
    current = data
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
