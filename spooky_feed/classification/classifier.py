"""Keyword-based classifier mapping cover image URLs to categories."""

from typing import List, Tuple
from .interfaces import ClassifierInterface, EpisodeCategory, DEFAULT_CATEGORY


class CategoryClassifier(ClassifierInterface):
    """Classifies episodes by keywords in their iTunes image URL.

    The show uses one cover image per category, so the file name is
    enough to tell them apart. Keywords are checked in order and the
    first match wins.
    """

    KEYWORDS: List[Tuple[EpisodeCategory, List[str]]] = [
        (EpisodeCategory.HALLOWEEN, ["halloween"]),
        (EpisodeCategory.TRUE_CRIME, ["true_crime", "truecrime"]),
        (EpisodeCategory.PARANORMAL, ["paranormal"]),
        (EpisodeCategory.MYSTIC, ["mystic"]),
        (EpisodeCategory.CREATURE, ["creature"]),
        (EpisodeCategory.FILM_REVIEW, ["filmreview", "film_review"]),
        (EpisodeCategory.CREEPYPASTA, ["creepypasta"]),
        (EpisodeCategory.NEWS, ["news"]),
        (EpisodeCategory.TRUE_STORY, ["true_story", "truestory"]),
        (EpisodeCategory.LIVE_REPORT, ["spookylivereport", "livereport"]),
        (EpisodeCategory.PROJECT_EVEREST, ["project_everest", "everest"]),
    ]

    def classify(self, image_url: str) -> EpisodeCategory:
        """Classify an episode by its image URL."""
        if not image_url:
            return DEFAULT_CATEGORY

        url = image_url.lower()

        for category, keywords in self.KEYWORDS:
            if any(keyword in url for keyword in keywords):
                return category

        return DEFAULT_CATEGORY
