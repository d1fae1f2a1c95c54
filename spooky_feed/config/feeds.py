"""Feed configuration loader."""

from typing import List, Optional

from .settings import Settings, settings as default_settings
from ..ingestion.interfaces import FeedConfig, FeedRole


def load_feeds(config: Optional[Settings] = None) -> List[FeedConfig]:
    """Build feed configurations from settings.

    The primary feed is always first. The external feed is only included
    when a URL is configured.
    """
    config = config or default_settings

    feeds = [
        FeedConfig(
            name="primary",
            url=config.primary_feed_url,
            role=FeedRole.PRIMARY,
        )
    ]

    if config.secondary_feed_url:
        feeds.append(FeedConfig(
            name="external",
            url=config.secondary_feed_url,
            role=FeedRole.EXTERNAL,
        ))

    return feeds

