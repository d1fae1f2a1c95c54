"""Presentation markup for recurring phrases in episode descriptions."""

import re
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Marker:
    """A recurring description phrase and the element that wraps it."""
    pattern: str
    css_class: str
    element: str = "span"


# The story call-to-action is written over two lines in the feed
MARKERS: List[Marker] = [
    Marker(r"Triggerwarnung", "episode-trigger-warning"),
    Marker(r"Quellen:", "episode-sources"),
    Marker(r"\bWerbung\b", "episode-ad"),
    Marker(r"Folgt uns auf Instagram", "episode-social"),
    Marker(
        r"Du hast selbst etwas Unheimliches erlebt\?(?:\s|<br\s*/?>)*Schreib uns deine Geschichte!",
        "episode-story-cta",
        element="div",
    ),
]


class DescriptionEnricher:
    """Wraps every occurrence of the known markers; the phrase text is kept as is."""

    def __init__(self, markers: List[Marker] = None):
        self.markers = markers if markers is not None else MARKERS
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns for efficiency."""
        self.compiled = [(re.compile(m.pattern), m) for m in self.markers]

    def enrich(self, description: str) -> str:
        """Return the description with marker phrases wrapped."""
        if not description:
            return description

        for pattern, marker in self.compiled:
            description = pattern.sub(
                lambda match, m=marker: f'<{m.element} class="{m.css_class}">{match.group(0)}</{m.element}>',
                description,
            )

        return description
