"""Pipeline orchestration - feed aggregation and episode queries."""

from .aggregator import (
    AggregatorState, FeedAggregator,
    dedupe_episodes, sort_episodes, mark_external
)
from .queries import (
    fetch_podcast_feed, get_latest_episodes, get_all_episodes,
    get_episodes_by_category, get_episode_by_id, get_episode_by_slug
)

__all__ = [
    "AggregatorState", "FeedAggregator",
    "dedupe_episodes", "sort_episodes", "mark_external",
    "fetch_podcast_feed", "get_latest_episodes", "get_all_episodes",
    "get_episodes_by_category", "get_episode_by_id", "get_episode_by_slug"
]
