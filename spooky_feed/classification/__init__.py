"""Episode classification by cover image."""

from .interfaces import EpisodeCategory, DEFAULT_CATEGORY, ClassifierInterface
from .classifier import CategoryClassifier

__all__ = [
    "EpisodeCategory", "DEFAULT_CATEGORY",
    "ClassifierInterface", "CategoryClassifier"
]
