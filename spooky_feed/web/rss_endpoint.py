"""RSS passthrough: the upstream feed with item links pointing at our episode pages."""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional
from xml.sax.saxutils import escape

import structlog

from ..config.feeds import load_feeds
from ..config.settings import Settings, settings as default_settings
from ..extraction.pattern import decode_text
from ..ingestion.fetcher import RSSFetcher
from ..ingestion.interfaces import FeedConfig, FetcherInterface
from ..models import PodcastFeed
from ..normalization.text import generate_slug
from ..pipeline.aggregator import FeedAggregator

logger = structlog.get_logger()

RSS_CONTENT_TYPE = "application/rss+xml; charset=utf-8"

# Served with status 500 whenever the passthrough cannot be built
ERROR_RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>{title}</title>
    <description>Error loading RSS feed</description>
    <link>{link}</link>
  </channel>
</rss>"""

_FLAGS = re.IGNORECASE | re.DOTALL

ITEM_BLOCK = re.compile(r"(<item(?:\s[^>]*)?(?<!/)>)(.*?)(</item\s*>)", _FLAGS)
GUID_ELEMENT = re.compile(r"<guid(?:\s[^>]*)?(?<!/)>(.*?)</guid\s*>", _FLAGS)
TITLE_ELEMENT = re.compile(r"<title(?:\s[^>]*)?(?<!/)>(.*?)</title\s*>", _FLAGS)
LINK_ELEMENT = re.compile(r"(<link(?:\s[^>]*)?(?<!/)>)(.*?)(</link\s*>)", _FLAGS)


@dataclass
class RSSResponse:
    """HTTP-style response handed to the routing layer."""
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": RSS_CONTENT_TYPE})


def build_slug_map(feed: PodcastFeed) -> Dict[str, str]:
    """Map each episode's guid and title to its slug."""
    slug_map = {}
    for episode in feed.episodes:
        if episode.guid:
            slug_map[episode.guid] = episode.slug
        if episode.title:
            slug_map[episode.title] = episode.slug
    return slug_map


def episode_url(base_url: str, slug: str) -> str:
    """Canonical URL of an episode page."""
    return f"{base_url.rstrip('/')}/episode/{slug}"


def rewrite_item_links(xml: str, slug_map: Dict[str, str], base_url: str) -> str:
    """Point every item's ``<link>`` at its local episode page.

    Items are matched by guid, then by title, and otherwise get a slug
    computed from the title. Items without a link get one right after
    their title.
    """

    def rewrite(match) -> str:
        opening, content, closing = match.groups()

        guid_match = GUID_ELEMENT.search(content)
        title_match = TITLE_ELEMENT.search(content)
        guid = decode_text(guid_match.group(1)) if guid_match else ""
        title = decode_text(title_match.group(1)) if title_match else ""

        slug = slug_map.get(guid) or slug_map.get(title) or generate_slug(title)
        if not slug:
            return match.group(0)

        url = escape(episode_url(base_url, slug))

        if LINK_ELEMENT.search(content):
            content = LINK_ELEMENT.sub(lambda m: f"{m.group(1)}{url}{m.group(3)}", content, count=1)
        elif title_match:
            end = title_match.end()
            content = f"{content[:end]}\n    <link>{url}</link>{content[end:]}"

        return f"{opening}{content}{closing}"

    return ITEM_BLOCK.sub(rewrite, xml)


def error_response(config: Settings = None) -> RSSResponse:
    """Minimal valid RSS document with status 500."""
    config = config or default_settings
    body = ERROR_RSS_TEMPLATE.format(
        title=escape(config.show_title),
        link=escape(config.site_base_url or "/"),
    )
    return RSSResponse(status=500, body=body)


async def _fetch_original(feed: FeedConfig, fetcher: Optional[FetcherInterface], config: Settings) -> str:
    if fetcher is not None:
        return await fetcher.fetch_text(feed)
    async with RSSFetcher(timeout_seconds=config.fetch_timeout_seconds) as own_fetcher:
        return await own_fetcher.fetch_text(feed)


async def generate_rss_response(
    config: Settings = None,
    fetcher: FetcherInterface = None,
    aggregator: FeedAggregator = None,
) -> RSSResponse:
    """Build the passthrough feed. Always returns a valid RSS document."""
    config = config or default_settings

    try:
        primary = load_feeds(config)[0]
        original_xml = await _fetch_original(primary, fetcher, config)

        aggregator = aggregator or FeedAggregator(config=config, fetcher=fetcher)
        feed = await aggregator.build_feed()

        body = rewrite_item_links(original_xml, build_slug_map(feed), config.site_base_url)
        logger.info("rss_passthrough_built", episodes=len(feed.episodes), length=len(body))
        return RSSResponse(status=200, body=body)

    except Exception as e:
        logger.error("rss_passthrough_failed", error=str(e))
        return error_response(config)
