"""Description enrichment - presentation markup for episode text."""

from .description import Marker, MARKERS, DescriptionEnricher

__all__ = ["Marker", "MARKERS", "DescriptionEnricher"]
