"""Feed XML extraction - document tree and regex strategies.

StructuredExtractor is imported from ``.structured`` or obtained through
``get_extractor`` so that lxml is only loaded when it is used.
"""

from .interfaces import RawItem, ExtractedFeed, ExtractorInterface
from .pattern import PatternExtractor
from .factory import get_extractor

__all__ = [
    "RawItem", "ExtractedFeed", "ExtractorInterface",
    "PatternExtractor", "get_extractor"
]
