"""Interface definitions for feed ingestion."""

from dataclasses import dataclass
from enum import Enum


class FeedRole(Enum):
    """Role of a feed within the aggregated episode list."""
    PRIMARY = "primary"      # The show's own feed - required
    EXTERNAL = "external"    # Shared cross-promotion feed - best effort


@dataclass
class FeedConfig:
    """Configuration for a single feed."""
    name: str
    url: str
    role: FeedRole
    enabled: bool = True


class FetcherInterface:
    """Interface for feed fetching."""

    async def fetch_text(self, config: FeedConfig) -> str:
        """Fetch the raw XML text of a single feed."""
        raise NotImplementedError
