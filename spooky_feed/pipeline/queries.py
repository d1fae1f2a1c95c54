"""Episode accessors for page rendering.

Every call runs the full aggregation again; nothing is cached between
calls. None of these functions raise.
"""

from typing import List, Optional

from .aggregator import FeedAggregator
from ..models import Episode, PodcastFeed


async def fetch_podcast_feed(aggregator: FeedAggregator = None) -> PodcastFeed:
    """Build a fresh feed."""
    aggregator = aggregator or FeedAggregator()
    return await aggregator.build_feed()


async def get_latest_episodes(count: int = 2, aggregator: FeedAggregator = None) -> List[Episode]:
    """Newest ``count`` episodes, for the homepage."""
    feed = await fetch_podcast_feed(aggregator)
    return list(feed.episodes[:max(count, 0)])


async def get_all_episodes(aggregator: FeedAggregator = None) -> List[Episode]:
    """All episodes, newest first."""
    feed = await fetch_podcast_feed(aggregator)
    return list(feed.episodes)


async def get_episodes_by_category(category: str, aggregator: FeedAggregator = None) -> List[Episode]:
    """Episodes whose category matches exactly."""
    feed = await fetch_podcast_feed(aggregator)
    return [episode for episode in feed.episodes if episode.category == category]


async def get_episode_by_id(episode_id: str, aggregator: FeedAggregator = None) -> Optional[Episode]:
    """First episode with the given id, or None."""
    feed = await fetch_podcast_feed(aggregator)
    return next((e for e in feed.episodes if e.id == episode_id), None)


async def get_episode_by_slug(slug: str, aggregator: FeedAggregator = None) -> Optional[Episode]:
    """First episode with the given slug, or None."""
    feed = await fetch_podcast_feed(aggregator)
    return next((e for e in feed.episodes if e.slug == slug), None)
