"""Feed aggregation: fetch, parse, merge, de-duplicate and sort."""

import asyncio
from dataclasses import replace
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional, Tuple

import structlog

from ..classification.interfaces import EpisodeCategory
from ..config.feeds import load_feeds
from ..config.settings import Settings, settings as default_settings
from ..extraction.factory import get_extractor
from ..extraction.interfaces import ExtractorInterface
from ..ingestion.fetcher import RSSFetcher
from ..ingestion.interfaces import FeedConfig, FeedRole, FetcherInterface
from ..models import FALLBACK_FEED, Episode, PodcastFeed
from ..normalization.text import date_timestamp
from ..parsing.episode_parser import EpisodeParser

logger = structlog.get_logger()

EXTERNAL_SOURCE = "external"


class AggregatorState(Enum):
    """Stages of a single aggregation run."""
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    MERGING = "merging"
    READY = "ready"
    DEGRADED = "degraded"


def episode_key(episode: Episode) -> str:
    """De-duplication key: guid, then slug, then title plus date."""
    return episode.guid or episode.slug or f"{episode.title}-{episode.pub_date}"


def dedupe_episodes(episodes: Iterable[Episode]) -> List[Episode]:
    """Drop repeated episodes, keeping the first occurrence."""
    seen = set()
    unique = []
    for episode in episodes:
        key = episode_key(episode)
        if key not in seen:
            seen.add(key)
            unique.append(episode)
    return unique


def _as_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def compare_episodes(a: Episode, b: Episode) -> int:
    """Newest first: by episode number when both are numeric, else by date."""
    a_number, b_number = _as_int(a.id), _as_int(b.id)
    if a_number is not None and b_number is not None:
        return b_number - a_number

    a_time, b_time = date_timestamp(a.published_at), date_timestamp(b.published_at)
    return (b_time > a_time) - (b_time < a_time)


def sort_episodes(episodes: Iterable[Episode]) -> List[Episode]:
    """Sort episodes newest first."""
    return sorted(episodes, key=cmp_to_key(compare_episodes))


def is_show_episode(episode: Episode, marker: str) -> bool:
    """Whether an external-feed episode belongs to this show."""
    return marker.lower() in episode.title.lower()


def mark_external(episode: Episode) -> Episode:
    """Tag an episode taken from the cross-promotion feed."""
    return replace(
        episode,
        image_url="",
        category=EpisodeCategory.PODFLUENCER.value,
        is_podfluencer=True,
        source=EXTERNAL_SOURCE,
    )


class FeedAggregator:
    """Builds a PodcastFeed from the primary feed and the optional external feed.

    ``build_feed`` never raises: every failure ends in the DEGRADED state
    and returns FALLBACK_FEED.
    """

    def __init__(
        self,
        config: Settings = None,
        fetcher: FetcherInterface = None,
        extractor: ExtractorInterface = None,
        parser: EpisodeParser = None,
        feeds: List[FeedConfig] = None,
    ):
        self.config = config or default_settings
        self.fetcher = fetcher
        self.extractor = extractor or get_extractor(self.config.use_structured_parser)
        self.parser = parser or EpisodeParser(
            display_timezone=self.config.display_timezone,
            keep_image_url=self.config.keep_image_urls,
        )
        self.feeds = feeds if feeds is not None else load_feeds(self.config)
        self.state = AggregatorState.IDLE

    def _transition(self, state: AggregatorState, **context):
        self.state = state
        logger.debug("aggregator_state", state=state.value, **context)

    def _feed_for(self, role: FeedRole) -> Optional[FeedConfig]:
        for feed in self.feeds:
            if feed.role == role and feed.enabled:
                return feed
        return None

    async def build_feed(self) -> PodcastFeed:
        """Run fetch -> parse -> merge and return the feed."""
        try:
            self._transition(AggregatorState.FETCHING)
            primary_xml, external_xml = await self.fetch_sources()

            if primary_xml is None:
                return self._degrade("primary feed unavailable")

            return self.assemble(primary_xml, external_xml)

        except Exception as e:
            logger.error("feed_build_failed", error=str(e), state=self.state.value)
            return self._degrade(str(e))

    async def fetch_sources(self) -> Tuple[Optional[str], Optional[str]]:
        """Fetch primary and external feeds concurrently.

        Returns ``(None, None)`` when the primary feed fails. An external
        failure only drops the external feed.
        """
        if self.fetcher is not None:
            return await self._gather(self.fetcher)

        async with RSSFetcher(timeout_seconds=self.config.fetch_timeout_seconds) as fetcher:
            return await self._gather(fetcher)

    async def _gather(self, fetcher: FetcherInterface) -> Tuple[Optional[str], Optional[str]]:
        primary = self._feed_for(FeedRole.PRIMARY)
        external = self._feed_for(FeedRole.EXTERNAL)

        if primary is None:
            logger.error("primary_feed_not_configured")
            return None, None

        tasks = [fetcher.fetch_text(primary)]
        if external is not None:
            tasks.append(fetcher.fetch_text(external))

        results = await asyncio.gather(*tasks, return_exceptions=True)

        primary_xml = results[0]
        if isinstance(primary_xml, BaseException):
            logger.error("primary_feed_unavailable", feed=primary.name, error=str(primary_xml))
            return None, None

        external_xml = None
        if len(results) > 1:
            if isinstance(results[1], BaseException):
                logger.warning("external_feed_unavailable", feed=external.name, error=str(results[1]))
            else:
                external_xml = results[1]

        return primary_xml, external_xml

    def assemble(self, primary_xml: str, external_xml: Optional[str] = None) -> PodcastFeed:
        """Parse, merge and sort already-fetched feed documents."""
        self._transition(AggregatorState.PARSING, extractor=self.extractor.name)
        primary = self.extractor.extract(primary_xml)
        primary_episodes = self.parser.parse_all(primary.items)
        external_episodes = self._parse_external(external_xml)

        self._transition(AggregatorState.MERGING)
        merged = dedupe_episodes(primary_episodes + external_episodes)
        episodes = sort_episodes(merged)

        feed = PodcastFeed(
            title=primary.title or self.config.show_title,
            description=primary.description or self.config.show_description,
            episodes=tuple(episodes),
        )

        self._transition(AggregatorState.READY)
        logger.info(
            "feed_built",
            episodes=len(episodes),
            primary=len(primary_episodes),
            external=len(external_episodes),
            duplicates=len(primary_episodes) + len(external_episodes) - len(merged),
        )
        return feed

    def _parse_external(self, external_xml: Optional[str]) -> List[Episode]:
        """Episodes of this show found in the external feed, tagged as such."""
        if not external_xml:
            return []

        try:
            extracted = self.extractor.extract(external_xml)
            episodes = self.parser.parse_all(extracted.items)
        except Exception as e:
            logger.warning("external_feed_unparseable", error=str(e))
            return []

        marker = self.config.external_title_marker

        accepted = [mark_external(e) for e in episodes if is_show_episode(e, marker)]
        logger.info("external_episodes_filtered", total=len(episodes), accepted=len(accepted))
        return accepted

    def _degrade(self, reason: str) -> PodcastFeed:
        self._transition(AggregatorState.DEGRADED, reason=reason)
        logger.warning("using_fallback_feed", reason=reason)
        return FALLBACK_FEED
