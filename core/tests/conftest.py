"""Pytest fixtures for core app tests."""

import json

import pytest

from core.aggregators.utils import cache


def make_page(data) -> str:
    """Wrap a __NEXT_DATA__ object in a minimal HTML page."""
    return (
        "<html><head><title>Page</title></head><body><div id='__next'></div>"
        f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(data)}</script>'
        "</body></html>"
    )


def listing_data(items, state="news"):
    return {"props": {"initialState": {state: {"data": {"items": items}}}}}


def article_data(record, legacy=False):
    if legacy:
        return {"props": {"initialProps": {"pageProps": {"items": record}}}}
    return {"props": {"initialState": {"content": {"data": {"items": record}}}}}


@pytest.fixture(autouse=True)
def clear_article_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def summary():
    return {
        "id": 101,
        "title": "Flooding in Chiang Mai",
        "abstract": "Heavy rain floods the old city.",
        "publishTime": "2024-09-25T08:30:00.000Z",
        "fullPath": "/news/local/north/101",
        "sourceFrom": "Thairath Online",
        "tags": ["flood", "chiang mai"],
        "images": {"square": "https://static.example.com/101-square.jpg"},
    }


@pytest.fixture
def detail():
    return {
        "id": 101,
        "title": "Flooding in Chiang Mai worsens",
        "abstract": "Detail abstract.",
        "content": (
            "<p>Water levels rose overnight.</p>"
            "<figure><picture><source srcset='a.webp' type='image/webp'>"
            "<img src='https://static.example.com/body.jpg' alt='River'></picture>"
            "<figcaption>The Ping river</figcaption></figure>"
        ),
        "publishTime": "2024-09-25 15:30:00",
        "fullPath": "/news/local/north/101",
        "credit": "Reporter A",
        "sourceFrom": "Thairath Online",
        "tags": ["flood"],
        "thumbnail": {"shareImage": "https://static.example.com/101-share.jpg"},
        "image": "https://static.example.com/101.jpg",
    }
