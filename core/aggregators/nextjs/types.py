"""Accessor for article records found in Next.js page data."""

from typing import Any, Dict, List, Optional


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


class NewsRecord:
    """
    Article record from a listing or an article page.

    Listing entries and article pages share these fields; article pages
    carry richer image data, which stays available through ``data``.
    """

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.id = data.get("id")
        self.title = _str_or_empty(data.get("title")).strip()
        self.abstract = _str_or_empty(data.get("abstract"))
        self.content = _str_or_empty(data.get("content"))
        self.publish_time = _str_or_empty(data.get("publishTime"))
        self.full_path = _str_or_empty(data.get("fullPath"))
        self.credit = _str_or_empty(data.get("credit"))
        self.source_from = _str_or_empty(data.get("sourceFrom"))

    @property
    def tags(self) -> Optional[List[str]]:
        """Tag list, or None when the record has no usable tags."""
        tags = self.data.get("tags")
        if not isinstance(tags, list):
            return None
        cleaned = [tag for tag in tags if isinstance(tag, str) and tag]
        return cleaned or None

    @property
    def author(self) -> Optional[str]:
        return self.credit or self.source_from or None

    def __repr__(self) -> str:
        return f"NewsRecord(id={self.id!r}, title={self.title!r})"
