"""Image selection for article records."""

from typing import Any, Dict, Tuple

# (container field, nested field) in priority order. A nested field of
# None means the container itself holds the URL string.
IMAGE_CANDIDATES: Tuple[Tuple[str, Any], ...] = (
    ("thumbnail", "shareImage"),
    ("thumbnail", "image"),
    ("images", "panorama"),
    ("images", "square"),
    ("images", "thumbnail"),
    ("imageSML", "large"),
    ("imageSML", "medium"),
    ("imageSML", "small"),
    ("image", None),
    ("coverImage", "url"),
)


def resolve_best_image(record: Dict[str, Any]) -> str:
    """
    Pick the most complete image URL available on a record.

    Tries share-optimized thumbnails first, then listing image variants,
    size-keyed variants, the flat image field and finally the cover image.

    Args:
        record: Raw article dict from page data

    Returns:
        Image URL, or empty string if the record has none
    """
    if not isinstance(record, dict):
        return ""

    for container_key, field in IMAGE_CANDIDATES:
        value = record.get(container_key)
        if field is not None:
            value = value.get(field) if isinstance(value, dict) else None
        if isinstance(value, str) and value:
            return value

    return ""
