"""Interface definitions for episode classification."""

from enum import Enum


class EpisodeCategory(Enum):
    """Categories an episode can be filed under."""
    HALLOWEEN = "halloween"
    TRUE_CRIME = "true crime"
    PARANORMAL = "paranormal"
    MYSTIC = "mystic"
    CREATURE = "creature"
    FILM_REVIEW = "filmreview"
    CREEPYPASTA = "creepypasta"
    NEWS = "news"
    TRUE_STORY = "true story"  # Default
    LIVE_REPORT = "spookylivereport"
    PROJECT_EVEREST = "projecteverest"
    PODFLUENCER = "podfluencer-folgen"  # External feed only, never matched by keyword


DEFAULT_CATEGORY = EpisodeCategory.TRUE_STORY


class ClassifierInterface:
    """Interface for episode classification."""

    def classify(self, image_url: str) -> EpisodeCategory:
        """Classify a single episode from its cover image URL."""
        raise NotImplementedError
