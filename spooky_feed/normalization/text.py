"""Pure string normalizers for feed fields: slugs, durations and dates."""

import re
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

DEFAULT_DURATION = "0:00"

_UMLAUTS = {"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"}
_UMLAUT_PATTERN = re.compile("[äöüß]")

# ASCII word characters only; whitespace stays Unicode-aware so it becomes a hyphen
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")

# Short month names as rendered by the de-DE locale
GERMAN_MONTHS = [
    "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
    "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
]


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from an episode title.

    German umlauts and ß are transliterated before anything is stripped,
    so "Müller" becomes "mueller" rather than "mller". May return an empty
    string when the title has no usable characters.
    """
    slug = (title or "").lower()
    slug = _UMLAUT_PATTERN.sub(lambda m: _UMLAUTS[m.group(0)], slug)
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def parse_duration(value: str) -> str:
    """Normalize an iTunes duration to ``H:MM:SS`` or ``M:SS``.

    Three-part values keep hours and minutes and always end in ``:00``.
    Two-part values get zero-padded seconds. Anything else, including
    non-numeric parts, is returned as given.
    """
    if not value:
        return DEFAULT_DURATION

    parts = value.strip().split(":")

    try:
        if len(parts) == 3:
            hours = int(parts[0])
            minutes = int(parts[1])
            return f"{hours}:{minutes:02d}:00"
        elif len(parts) == 2:
            minutes = int(parts[0])
            seconds = int(parts[1])
            return f"{minutes}:{seconds:02d}"
    except ValueError:
        return value

    return value


def parse_date(value: str) -> Optional[datetime]:
    """Parse a feed date string, returning None when it cannot be read."""
    if not value or not value.strip():
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError, TypeError):
        return None


def date_timestamp(value: Optional[datetime]) -> float:
    """POSIX timestamp for sorting. Missing dates sort as epoch 0, naive ones as UTC."""
    if value is None:
        return 0.0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def format_date(value: str, tz_name: str = "Europe/Berlin") -> str:
    """Format a feed date for German display, e.g. ``05. Jan. 2024``.

    Returns the input unchanged if it cannot be parsed.
    """
    parsed = parse_date(value)
    if parsed is None:
        return value

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(ZoneInfo(tz_name))

    return f"{parsed.day:02d}. {GERMAN_MONTHS[parsed.month - 1]} {parsed.year}"
