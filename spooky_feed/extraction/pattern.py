"""Regex extraction for environments without an XML parser.

Deliberately tolerant. The matching rules:

- tag names match case-insensitively and opening tags may carry attributes;
- only the first element with a tag is read;
- if its body is a single CDATA section, that is taken verbatim;
- otherwise the body is decoded like XML text content: CDATA sections
  kept, comments dropped, XML entities and character references resolved;
- attributes are read from the first opening tag that carries them.
"""

import re
from functools import lru_cache

import structlog

from .interfaces import ExtractedFeed, ExtractorInterface, RawItem

logger = structlog.get_logger()

_FLAGS = re.IGNORECASE | re.DOTALL

ITEM_PATTERN = re.compile(r"<item(?:\s[^>]*)?(?<!/)>(.*?)</item\s*>", _FLAGS)
MARKUP_SECTION = re.compile(r"<!\[CDATA\[(.*?)\]\]>|<!--.*?-->", re.DOTALL)
REFERENCE = re.compile(r"&(?:#([0-9]+)|#x([0-9a-fA-F]+)|(amp|lt|gt|quot|apos));")

XML_ENTITIES = {"amp": "&", "lt": "<", "gt": ">", "quot": '"', "apos": "'"}

# Literal whitespace in attribute values is normalized to spaces
_ATTRIBUTE_WHITESPACE = re.compile(r"\r\n|[\t\r\n]")


@lru_cache(maxsize=64)
def _value_patterns(tag: str):
    name = re.escape(tag)
    opening = rf"<{name}(?:\s[^>]*)?(?<!/)>"
    closing = rf"</{name}\s*>"
    start = re.compile(rf"<{name}(?:\s[^>]*)?/?>", _FLAGS)
    cdata = re.compile(rf"{opening}<!\[CDATA\[((?:(?!\]\]>).)*)\]\]>{closing}", _FLAGS)
    plain = re.compile(rf"{opening}(.*?){closing}", _FLAGS)
    return start, cdata, plain


@lru_cache(maxsize=64)
def _attribute_pattern(tag: str, attribute: str):
    return re.compile(
        rf"<{re.escape(tag)}\s(?:[^>]*?\s)?{re.escape(attribute)}\s*=\s*([\"'])(.*?)\1",
        _FLAGS,
    )


def _resolve_reference(match) -> str:
    decimal, hexadecimal, name = match.groups()
    if name:
        return XML_ENTITIES[name]
    codepoint = int(decimal) if decimal else int(hexadecimal, 16)
    if codepoint > 0x10FFFF:
        return match.group(0)
    return chr(codepoint)


def unescape_xml(text: str) -> str:
    """Resolve the predefined XML entities and numeric character references."""
    return REFERENCE.sub(_resolve_reference, text)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def decode_text(raw: str) -> str:
    """Decode an element body the way a parser builds its text content."""
    raw = _normalize_newlines(raw)
    parts = []
    position = 0
    for match in MARKUP_SECTION.finditer(raw):
        parts.append(unescape_xml(raw[position:match.start()]))
        # group 1 is None for comments, which contribute no text
        if match.group(1) is not None:
            parts.append(match.group(1))
        position = match.end()
    parts.append(unescape_xml(raw[position:]))
    return "".join(parts)


def decode_attribute(raw: str) -> str:
    """Decode an attribute value the way a parser normalizes it."""
    return unescape_xml(_ATTRIBUTE_WHITESPACE.sub(" ", raw))


def extract_value(tag: str, xml: str) -> str:
    """Text of the first ``tag`` element, CDATA form preferred."""
    start, cdata, plain = _value_patterns(tag)

    opening = start.search(xml)
    if not opening or opening.group(0).endswith("/>"):
        return ""

    match = cdata.match(xml, opening.start())
    if match:
        return _normalize_newlines(match.group(1))

    match = plain.match(xml, opening.start())
    return decode_text(match.group(1)) if match else ""


def extract_attribute(tag: str, attribute: str, xml: str) -> str:
    """Value of ``attribute`` on the first ``tag`` element that has it."""
    match = _attribute_pattern(tag, attribute).search(xml)
    return decode_attribute(match.group(2)) if match else ""


class PatternExtractor(ExtractorInterface):
    """Extracts feed fields with regular expressions over the raw text."""

    name = "pattern"

    def extract(self, xml_text: str) -> ExtractedFeed:
        matches = list(ITEM_PATTERN.finditer(xml_text))

        # Channel fields live before the first item
        header = xml_text[:matches[0].start()] if matches else xml_text

        feed = ExtractedFeed(
            title=extract_value("title", header),
            description=extract_value("description", header),
            items=[self._extract_item(m.group(1)) for m in matches],
        )

        logger.debug("feed_extracted", strategy=self.name, items=len(feed.items))
        return feed

    def _extract_item(self, item_xml: str) -> RawItem:
        image_url = (
            extract_attribute("itunes:image", "href", item_xml)
            or extract_attribute("image", "href", item_xml)
            or extract_attribute("image", "url", item_xml)
        )

        return RawItem(
            title=extract_value("title", item_xml),
            description=extract_value("description", item_xml),
            pub_date=extract_value("pubDate", item_xml),
            guid=extract_value("guid", item_xml),
            itunes_duration=extract_value("itunes:duration", item_xml),
            duration=extract_value("duration", item_xml),
            enclosure_url=extract_attribute("enclosure", "url", item_xml),
            itunes_image_url=image_url,
        )
