"""Data ingestion - fetching RSS feeds."""

from .interfaces import FeedConfig, FeedRole, FetcherInterface
from .fetcher import RSSFetcher

__all__ = ["FeedConfig", "FeedRole", "FetcherInterface", "RSSFetcher"]
