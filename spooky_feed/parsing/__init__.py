"""Episode parsing - raw feed items to Episode records."""

from .episode_parser import EpisodeParser, DEFAULT_TITLE

__all__ = ["EpisodeParser", "DEFAULT_TITLE"]
