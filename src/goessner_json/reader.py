"""
Build the read-only XML tree (`goessner_json.tree`) from XML input.

`parse_xml` drives expat directly so CDATA sections survive as their own
segments; ElementTree folds them into plain text. Namespace processing is
off: `soap:Body` is split into prefix `soap` and local name `Body`, and
`xmlns` declarations stay ordinary attributes. Comments, processing
instructions and anything outside the root element are dropped. Entity
declarations are refused.

`from_etree` adapts an already parsed `xml.etree.ElementTree` element.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union
from xml.parsers import expat

from goessner_json.errors import XmlReadError
from goessner_json.logging_setup import get_logger
from goessner_json.tree import Attribute, CData, Element, Node, Text, split_qname

log = get_logger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class _TreeBuilder:
    def __init__(self, parser):
        self.parser = parser
        # (local name, prefix, attributes, children) per open element
        self.stack: List[Tuple[str, Optional[str], List[Attribute], List[Node]]] = []
        self.root: Optional[Element] = None
        self.data: List[str] = []
        self.in_cdata = False

    def _flush(self) -> None:
        if not self.data:
            return
        value = "".join(self.data)
        self.data = []
        segment = CData(value) if self.in_cdata else Text(value)
        self.stack[-1][3].append(segment)

    def start_element(self, qname, attrs):
        self._flush()
        prefix, name = split_qname(qname)
        attributes = []
        for key, value in zip(attrs[0::2], attrs[1::2]):
            attr_prefix, attr_name = split_qname(key)
            attributes.append(Attribute(attr_name, value, attr_prefix))
        self.stack.append((name, prefix, attributes, []))

    def end_element(self, qname):
        self._flush()
        name, prefix, attributes, children = self.stack.pop()
        element = Element(name, prefix, attributes, children)
        if self.stack:
            self.stack[-1][3].append(element)
        else:
            self.root = element

    def characters(self, data):
        if self.stack:
            self.data.append(data)

    def start_cdata(self):
        self._flush()
        self.in_cdata = True

    def end_cdata(self):
        self._flush()
        self.in_cdata = False

    def forbid_entities(self, *_args, **_kwargs):
        raise XmlReadError(
            "Entity declarations are not allowed",
            self.parser.CurrentLineNumber,
            self.parser.CurrentColumnNumber,
        )


def parse_xml(source: Union[str, bytes, BinaryIO], encoding: Optional[str] = None) -> Element:
    """Read XML from a str, bytes or binary file object into an Element tree.

    Raises XmlReadError on malformed input.
    """
    if isinstance(source, str):
        encoding = encoding or "utf-8"
        source = source.encode(encoding)

    parser = expat.ParserCreate(encoding)
    builder = _TreeBuilder(parser)
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.characters
    parser.StartCdataSectionHandler = builder.start_cdata
    parser.EndCdataSectionHandler = builder.end_cdata
    parser.EntityDeclHandler = builder.forbid_entities

    try:
        if hasattr(source, "read"):
            parser.ParseFile(source)
        else:
            parser.Parse(source, True)
    except expat.ExpatError as e:
        raise XmlReadError(expat.ErrorString(e.code), e.lineno, e.offset) from e

    if builder.root is None:
        raise XmlReadError("No root element found")
    log.debug("Read XML document", root=builder.root.qname())
    return builder.root


def _etree_name(tag: str, namespaces: Dict[str, str]) -> Tuple[Optional[str], str]:
    # '{uri}local' -> (prefix, local); unmapped URIs stay in the name.
    if not tag.startswith("{"):
        return None, tag
    uri, _, local = tag[1:].partition("}")
    prefix = namespaces.get(uri)
    if prefix is None:
        return None, tag
    return prefix or None, local


def _etree_element(el: Any, children: List[Node], namespaces: Dict[str, str]) -> Element:
    prefix, name = _etree_name(el.tag, namespaces)
    attributes = []
    for key, value in el.attrib.items():
        attr_prefix, attr_name = _etree_name(key, namespaces)
        attributes.append(Attribute(attr_name, value, attr_prefix))
    return Element(name, prefix, attributes, children)


def from_etree(element: Any, namespaces: Optional[Dict[str, str]] = None) -> Element:
    """Adapt an ElementTree element (and its subtree) to an Element tree.

    `namespaces` maps namespace URIs to the prefixes used in keys; an empty
    prefix drops the namespace. Text and tails become Text segments (CDATA is
    not distinguishable once ElementTree has parsed it). The root's tail is
    ignored.
    """
    names = {XML_NAMESPACE: "xml"}
    names.update(namespaces or {})

    # Iterative walk so deep documents do not hit the recursion limit here.
    stack = [(element, iter(element), [Text(element.text)] if element.text else [])]
    while True:
        el, pending, children = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            built = _etree_element(el, children, names)
            if not stack:
                return built
            siblings = stack[-1][2]
            siblings.append(built)
            if el.tail:
                siblings.append(Text(el.tail))
            continue
        if not isinstance(child.tag, str):
            # Comment or processing instruction: keep only its tail.
            if child.tail:
                children.append(Text(child.tail))
            continue
        stack.append((child, iter(child), [Text(child.text)] if child.text else []))
