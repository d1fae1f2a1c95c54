"""Factory for choosing an extraction strategy.

The structured extractor needs lxml; the pattern extractor only needs the
raw text. Callers pass the capability flag explicitly so both strategies
stay selectable and testable side by side.
"""

from typing import Optional

import structlog

from .interfaces import ExtractorInterface

logger = structlog.get_logger()


def get_extractor(structured: Optional[bool] = None) -> ExtractorInterface:
    """Get the extractor for the given capability flag.

    When the flag is not given it is read from settings.
    """
    if structured is None:
        from ..config.settings import settings
        structured = settings.use_structured_parser

    if structured:
        from .structured import StructuredExtractor
        logger.debug("using_structured_extractor")
        return StructuredExtractor()
    else:
        from .pattern import PatternExtractor
        logger.debug("using_pattern_extractor")
        return PatternExtractor()
