"""Document-tree extraction using lxml."""

import structlog
from lxml import etree

from .interfaces import ExtractedFeed, ExtractorInterface, RawItem

logger = structlog.get_logger()

# The document is always handed over as UTF-8 bytes, whatever its declaration says
_STRICT_PARSER = etree.XMLParser(
    encoding="utf-8",
    resolve_entities=False,
    no_network=True,
    huge_tree=True,
)
_RECOVER_PARSER = etree.XMLParser(
    encoding="utf-8",
    resolve_entities=False,
    no_network=True,
    huge_tree=True,
    recover=True,
)


def _qualified_name(element) -> str:
    """Tag name as written in the document, e.g. ``itunes:duration``."""
    localname = etree.QName(element).localname
    return f"{element.prefix}:{localname}" if element.prefix else localname


def _is_element(element) -> bool:
    return isinstance(element.tag, str)


def _find(parent, name: str, stop_at: str = None):
    """First descendant with the given qualified name, in document order."""
    for element in parent.iterdescendants():
        if not _is_element(element):
            continue
        qualified = _qualified_name(element)
        if stop_at and qualified == stop_at:
            return None
        if qualified == name:
            return element
    return None


def _text(element) -> str:
    """Text content of an element, CDATA and entities resolved."""
    if element is None:
        return ""
    return str(element.xpath("string()"))


def _attribute(element, *names: str) -> str:
    if element is None:
        return ""
    for name in names:
        value = element.get(name)
        if value:
            return value
    return ""


class StructuredExtractor(ExtractorInterface):
    """Extracts feed fields by walking the parsed document tree.

    Lookups go by qualified tag name so ``itunes:*`` elements are found
    whatever namespace URI the feed declares.
    """

    name = "structured"

    def parse_document(self, xml_text: str):
        """Parse strictly, falling back to libxml2's recovery mode."""
        data = xml_text.lstrip("\ufeff \t\r\n").encode("utf-8")
        try:
            return etree.fromstring(data, parser=_STRICT_PARSER)
        except etree.XMLSyntaxError as e:
            logger.warning("feed_xml_recovering", error=str(e))
            root = etree.fromstring(data, parser=_RECOVER_PARSER)
            if root is None:
                raise ValueError(f"Feed XML could not be parsed: {e}") from e
            return root

    def extract(self, xml_text: str) -> ExtractedFeed:
        root = self.parse_document(xml_text)

        channel = root if _qualified_name(root) == "channel" else _find(root, "channel")
        feed = ExtractedFeed()
        if channel is not None:
            feed.title = _text(_find(channel, "title", stop_at="item"))
            feed.description = _text(_find(channel, "description", stop_at="item"))

        for element in root.iter():
            if _is_element(element) and _qualified_name(element) == "item":
                feed.items.append(self._extract_item(element))

        logger.debug("feed_extracted", strategy=self.name, items=len(feed.items))
        return feed

    def _extract_item(self, item) -> RawItem:
        image = _find(item, "itunes:image")
        image_url = _attribute(image, "href")
        if not image_url:
            image_url = _attribute(_find(item, "image"), "href", "url")

        return RawItem(
            title=_text(_find(item, "title")),
            description=_text(_find(item, "description")),
            pub_date=_text(_find(item, "pubDate")),
            guid=_text(_find(item, "guid")),
            itunes_duration=_text(_find(item, "itunes:duration")),
            duration=_text(_find(item, "duration")),
            enclosure_url=_attribute(_find(item, "enclosure"), "url"),
            itunes_image_url=image_url,
        )
