"""
Configuration for aggregator services.

Centralized configuration for HTTP requests and aggregation limits.
Settings can be overridden via Django settings (NEWSFEED_* variables).
"""

from django.conf import settings

# ==================== HTTP Settings ====================

# Request timeout in seconds
HTTP_TIMEOUT = getattr(settings, "NEWSFEED_HTTP_TIMEOUT", 30)

# User-Agent header for HTTP requests
USER_AGENT = getattr(
    settings,
    "NEWSFEED_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
)

# ==================== Aggregation Settings ====================

# Maximum number of listing entries expanded per run
DEFAULT_ITEM_CAP = getattr(settings, "NEWSFEED_DEFAULT_ITEM_CAP", 50)

# Override for the Thairath listing cap (None keeps the site default)
THAIRATH_ITEM_CAP = getattr(settings, "NEWSFEED_THAIRATH_ITEM_CAP", None)
