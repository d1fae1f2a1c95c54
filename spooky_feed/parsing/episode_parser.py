"""Turns raw feed items into normalized Episode records."""

import re
from typing import List

from ..classification.classifier import CategoryClassifier
from ..enrichment.description import DescriptionEnricher
from ..extraction.interfaces import RawItem
from ..models import Episode
from ..normalization.text import generate_slug, parse_duration, parse_date, format_date

DEFAULT_TITLE = "Untitled Episode"

EPISODE_NUMBER_PATTERN = re.compile(r"#([0-9]+)")


class EpisodeParser:
    """Builds Episodes from extracted items.

    ``index`` and ``total`` are positions within the item's own source
    feed. Titles without ``#<n>`` get ``total - index`` as their number,
    which assumes the feed lists newest episodes first.
    """

    def __init__(
        self,
        classifier: CategoryClassifier = None,
        enricher: DescriptionEnricher = None,
        display_timezone: str = "Europe/Berlin",
        keep_image_url: bool = False,
    ):
        self.classifier = classifier or CategoryClassifier()
        self.enricher = enricher or DescriptionEnricher()
        self.display_timezone = display_timezone
        self.keep_image_url = keep_image_url

    def parse(self, item: RawItem, index: int, total: int) -> Episode:
        """Parse one item at ``index`` of a feed with ``total`` items."""
        title = item.title or DEFAULT_TITLE
        guid = item.guid or f"episode-{index + 1}"

        match = EPISODE_NUMBER_PATTERN.search(title)
        episode_number = match.group(1) if match else str(total - index)

        duration = parse_duration(item.itunes_duration or item.duration)
        category = self.classifier.classify(item.itunes_image_url)

        return Episode(
            id=episode_number,
            title=title,
            slug=generate_slug(title),
            description=self.enricher.enrich(item.description),
            pub_date=format_date(item.pub_date, self.display_timezone),
            duration=duration,
            audio_url=item.enclosure_url,
            category=category.value,
            guid=guid,
            image_url=item.itunes_image_url if self.keep_image_url else "",
            published_at=parse_date(item.pub_date),
        )

    def parse_all(self, items: List[RawItem]) -> List[Episode]:
        """Parse every item of one source feed."""
        total = len(items)
        return [self.parse(item, index, total) for index, item in enumerate(items)]
