"""Episode and feed records handed to the rendering layer."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Episode:
    """A single normalized podcast episode.

    Records are never mutated; use ``dataclasses.replace`` to derive a
    changed copy.
    """
    id: str
    title: str
    slug: str
    description: str
    pub_date: str          # German display date, or the raw value if unparseable
    duration: str          # "H:MM:SS" or "M:SS"
    audio_url: str
    category: str
    guid: str
    image_url: str = ""
    is_podfluencer: bool = False
    source: Optional[str] = None  # "external" for cross-promotion episodes
    published_at: Optional[datetime] = field(default=None, repr=False)

    def to_dict(self) -> dict:
        """Convert to the dictionary shape used by page templates."""
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "pubDate": self.pub_date,
            "duration": self.duration,
            "audioUrl": self.audio_url,
            "category": self.category,
            "imageUrl": self.image_url,
            "guid": self.guid,
            "isPodfluencer": self.is_podfluencer,
            "source": self.source,
        }


@dataclass(frozen=True)
class PodcastFeed:
    """Channel info plus the ordered, de-duplicated episode list."""
    title: str
    description: str
    episodes: Tuple[Episode, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "episodes": [episode.to_dict() for episode in self.episodes],
        }


# Returned whenever the feed cannot be built
FALLBACK_FEED = PodcastFeed(
    title="Spooky Bitch Show",
    description="Der Grusel und Mystery Podcast",
    episodes=(),
)
