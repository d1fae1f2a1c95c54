"""Field normalization - slugs, durations and display dates."""

from .text import (
    DEFAULT_DURATION, generate_slug, parse_duration,
    parse_date, format_date, date_timestamp
)

__all__ = [
    "DEFAULT_DURATION", "generate_slug", "parse_duration",
    "parse_date", "format_date", "date_timestamp"
]
