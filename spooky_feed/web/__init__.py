"""Web surface - RSS passthrough endpoint and FastAPI app."""

from .rss_endpoint import (
    RSS_CONTENT_TYPE, ERROR_RSS_TEMPLATE, RSSResponse,
    build_slug_map, episode_url, rewrite_item_links, generate_rss_response
)

__all__ = [
    "RSS_CONTENT_TYPE", "ERROR_RSS_TEMPLATE", "RSSResponse",
    "build_slug_map", "episode_url", "rewrite_item_links", "generate_rss_response"
]
