"""HTML cleaning and sanitization utilities."""

from html import escape
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from .bs4_utils import get_attr_str

REFERRER_POLICY = "no-referrer"


def build_img_tag(src: str, alt: str = "") -> str:
    """
    Build a plain image tag that does not leak the referrer.

    Args:
        src: Image URL
        alt: Alternative text

    Returns:
        HTML string for a single <img> element
    """
    return (
        f'<img src="{escape(src, quote=True)}" alt="{escape(alt, quote=True)}" '
        f'referrerpolicy="{REFERRER_POLICY}" />'
    )


def build_image_block(src: Optional[str], alt: str) -> str:
    """
    Build the leading image paragraph used at the top of item descriptions.

    Returns an empty string when no image URL is given.
    """
    if not src:
        return ""
    return f"<p>{build_img_tag(src, alt)}</p>"


def _plain_img(soup: BeautifulSoup, picture: Tag) -> Optional[Tag]:
    """Create a bare <img> from the first image inside a <picture>."""
    img = picture.find("img")
    if img is None:
        return None

    return soup.new_tag(
        "img",
        attrs={
            "src": get_attr_str(img, "src"),
            "alt": get_attr_str(img, "alt"),
            "referrerpolicy": REFERRER_POLICY,
        },
    )


def collapse_picture_elements(soup: Union[BeautifulSoup, Tag], root: BeautifulSoup) -> None:
    """
    Replace <picture> markup with plain <img> tags.

    A <figure> holding a <picture> has its whole content replaced by the
    image, so captions and <source> variants are dropped. Any remaining
    <picture> is swapped for the image in place.

    Args:
        soup: BeautifulSoup or Tag object to modify in-place
        root: Document used to create the new tags
    """
    for picture in soup.select("figure picture"):
        # An earlier replacement may already have dropped this element
        if picture.parent is None:
            continue
        figure = picture.find_parent("figure")
        img = _plain_img(root, picture)
        if figure is None or img is None:
            continue
        figure.clear()
        figure.append(img)

    for picture in soup.find_all("picture"):
        img = _plain_img(root, picture)
        if img is not None:
            picture.replace_with(img)


def enforce_referrer_policy(soup: Union[BeautifulSoup, Tag]) -> None:
    """Set referrerpolicy="no-referrer" on every <img>."""
    for img in soup.find_all("img"):
        img["referrerpolicy"] = REFERRER_POLICY


def sanitize_article_html(html: Optional[str]) -> str:
    """
    Normalize article body HTML for feed readers.

    Collapses picture/figure markup into single image tags and forces the
    referrer policy on all images. Running it on its own output changes
    nothing.

    Args:
        html: HTML fragment (may be empty or None)

    Returns:
        Serialized HTML string, empty for empty input
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    collapse_picture_elements(soup, soup)
    enforce_referrer_policy(soup)

    return str(soup)
