"""
Read-only XML tree consumed by the conversion engine.

The engine never parses XML itself. Whatever builds the tree (see
`goessner_json.reader`, or caller code) hands over:

- Element: local name, optional namespace prefix, ordered attributes and
  ordered children
- Attribute: local name, optional prefix, string value
- Text / CData: character segments, kept apart so CDATA can be mapped to its
  own key

Children are interleaved in document order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


def qualified_name(name: str, prefix: Optional[str], separator: str) -> str:
    if prefix:
        return f"{prefix}{separator}{name}"
    return name


def split_qname(qname: str) -> Tuple[Optional[str], str]:
    """'soap:Body' -> ('soap', 'Body'); 'Body' -> (None, 'Body')."""
    prefix, sep, local = qname.partition(":")
    if not sep or not prefix or not local:
        return None, qname
    return prefix, local


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class CData:
    value: str


@dataclass(frozen=True)
class Attribute:
    name: str
    value: str
    prefix: Optional[str] = None

    def qname(self, separator: str = ":") -> str:
        return qualified_name(self.name, self.prefix, separator)


@dataclass(frozen=True)
class Element:
    name: str
    prefix: Optional[str] = None
    attributes: Tuple[Attribute, ...] = ()
    children: Tuple["Node", ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples so the tree stays read-only.
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def qname(self, separator: str = ":") -> str:
        return qualified_name(self.name, self.prefix, separator)


Node = Union[Element, Text, CData]
