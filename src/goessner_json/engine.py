"""
Goessner XML -> JSON conversion.

For every element, in this order:

1. attributes become `attribute_prefix + name` keys (document order)
2. child elements are grouped by qualified tag name, first-occurrence order;
   a tag seen once maps to its value, a repeated tag to an array of values
3. direct text segments are concatenated under `text_key` (whitespace-only
   segments dropped), CDATA segments under `cdata_key`
4. an element with no attributes, no child elements and only text collapses
   to the bare string (when `collapse_single_child_text` is on)
5. an element that produced nothing is null

Example:
    <a x="1"><b>1</b><c/><b>2</b>hi</a>
    -> {"@x": "1", "b": ["1", "2"], "c": null, "#text": "hi"}
"""

from __future__ import annotations

from typing import BinaryIO, Dict, List, Optional, Union

from goessner_json.config import DEFAULT_CONFIG, ConversionConfig
from goessner_json.constants import XML_WHITESPACE
from goessner_json.errors import DepthExceeded, KeyPrefixCollision
from goessner_json.logging_setup import get_logger
from goessner_json.reader import parse_xml
from goessner_json.tree import CData, Element
from goessner_json.values import JsonArray, JsonNull, JsonObject, JsonString, JsonValue

log = get_logger(__name__)


def _is_blank(segment: str) -> bool:
    return not segment.strip(XML_WHITESPACE)


class _Converter:
    """Holds the configuration and a few counters for a single call."""

    def __init__(self, config: ConversionConfig):
        self.config = config
        self.elements = 0
        self.deepest = 0

    def _put(self, obj: JsonObject, key: str, value: JsonValue, owner: str) -> None:
        if self.config.strict and key in obj:
            raise KeyPrefixCollision(key, owner)
        obj.set(key, value)

    def element(self, elem: Element, depth: int) -> JsonValue:
        cfg = self.config
        sep = cfg.namespace_separator
        owner = elem.qname(sep)
        if depth > cfg.max_depth:
            raise DepthExceeded(depth, cfg.max_depth, owner)
        self.elements += 1
        self.deepest = max(self.deepest, depth)

        obj = JsonObject()
        for attr in elem.attributes:
            self._put(obj, cfg.attribute_prefix + attr.qname(sep), JsonString(attr.value), owner)

        # One ordered pass: dict insertion order is first-occurrence order.
        groups: Dict[str, List[Element]] = {}
        text: List[str] = []
        cdata: List[str] = []
        for child in elem.children:
            if isinstance(child, Element):
                groups.setdefault(child.qname(sep), []).append(child)
            elif isinstance(child, CData):
                cdata.append(child.value)
            elif not _is_blank(child.value):
                text.append(child.value)

        for tag, members in groups.items():
            # Keep to one interpreter frame per nesting level.
            values = []
            for member in members:
                values.append(self.element(member, depth + 1))
            if len(values) == 1:
                self._put(obj, tag, values[0], owner)
            else:
                self._put(obj, tag, JsonArray(values), owner)

        text_value = "".join(text)
        cdata_value = "".join(cdata)
        if text_value:
            self._put(obj, cfg.text_key, JsonString(text_value), owner)
        if cdata_value:
            self._put(obj, cfg.cdata_key, JsonString(cdata_value), owner)

        # Decided on the element's structure, not on what ended up in obj.
        if (
            cfg.collapse_single_child_text
            and not elem.attributes
            and not groups
            and len(obj) == 1
            and cfg.text_key in obj
        ):
            return obj[cfg.text_key]
        if not len(obj):
            return JsonNull()
        return obj


def convert(root: Element, config: Optional[ConversionConfig] = None) -> JsonValue:
    """Convert `root` and its whole subtree into a JSON value.

    Raises DepthExceeded when nesting goes past `config.max_depth`, and
    KeyPrefixCollision in strict mode. Nothing partial is returned on error.
    """
    converter = _Converter(config or DEFAULT_CONFIG)
    value = converter.element(root, 1)
    log.debug(
        "Converted XML tree",
        root=root.qname(converter.config.namespace_separator),
        elements=converter.elements,
        deepest=converter.deepest,
    )
    return value


def convert_document(root: Element, config: Optional[ConversionConfig] = None) -> JsonObject:
    """Like `convert`, but keyed by the root tag: `<a>hi</a>` -> {"a": "hi"}."""
    cfg = config or DEFAULT_CONFIG
    return JsonObject([(root.qname(cfg.namespace_separator), convert(root, cfg))])


def xml_to_json(
    xml: Union[str, bytes, BinaryIO], config: Optional[ConversionConfig] = None
) -> JsonObject:
    """Read XML text (str, bytes or binary file object) and convert it as a document."""
    return convert_document(parse_xml(xml), config)
