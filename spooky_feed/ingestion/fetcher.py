"""Async RSS feed fetcher."""

import time
from typing import Optional

import aiohttp
import structlog

from .interfaces import FeedConfig, FetcherInterface
from ..config.settings import settings

logger = structlog.get_logger()


class RSSFetcher(FetcherInterface):
    """Async fetcher returning the raw XML of a feed.

    No retries: a failed fetch is reported to the caller immediately.
    """

    def __init__(self, timeout_seconds: int = None, user_agent: str = None):
        self.session: Optional[aiohttp.ClientSession] = None
        self.timeout_seconds = timeout_seconds or settings.fetch_timeout_seconds
        self.user_agent = user_agent or settings.user_agent

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
            headers={"User-Agent": self.user_agent}
        )
        return self

    async def __aexit__(self, *args):
        if self.session:
            await self.session.close()

    async def fetch_text(self, config: FeedConfig) -> str:
        """Fetch a feed's XML text. Raises on network errors and non-2xx status."""
        start_time = time.time()

        try:
            async with self.session.get(config.url) as response:
                response.raise_for_status()
                content = await response.text()

            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "feed_fetched",
                feed=config.name,
                length=len(content),
                time_ms=elapsed_ms
            )
            return content

        except Exception as e:
            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.error("feed_fetch_failed", feed=config.name, error=str(e), time_ms=elapsed_ms)
            raise
