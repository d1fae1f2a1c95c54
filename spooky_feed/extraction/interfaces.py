"""Interface definitions for feed XML extraction."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class RawItem:
    """Fields of one feed item, as found in the XML and not yet normalized."""
    title: str = ""
    description: str = ""
    pub_date: str = ""
    guid: str = ""
    itunes_duration: str = ""
    duration: str = ""
    enclosure_url: str = ""
    itunes_image_url: str = ""


@dataclass
class ExtractedFeed:
    """Channel metadata plus items, in feed order."""
    title: str = ""
    description: str = ""
    items: List[RawItem] = field(default_factory=list)


class ExtractorInterface:
    """Interface for feed extraction.

    Implementations must return identical results for the same
    well-formed document.
    """

    name: str = "base"

    def extract(self, xml_text: str) -> ExtractedFeed:
        """Extract channel info and items from raw feed XML."""
        raise NotImplementedError
