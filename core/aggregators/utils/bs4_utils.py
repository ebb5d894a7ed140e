"""BeautifulSoup utility functions for type-safe attribute access."""

from typing import Any


def get_attr_str(tag: Any, attr: str, default: str = "") -> str:
    """
    Get a tag attribute as a string, even if BeautifulSoup returns a list.

    Args:
        tag: BeautifulSoup Tag object
        attr: Attribute name
        default: Default value if attribute is missing

    Returns:
        Attribute value as a string
    """
    val = tag.get(attr)
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(val)
    return str(val)
