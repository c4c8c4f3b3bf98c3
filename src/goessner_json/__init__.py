"""XML to JSON conversion following Goessner's mapping rules."""

__version__ = "0.1.0"

from .config import ConversionConfig
from .engine import convert, convert_document, xml_to_json
from .errors import ConversionError, DepthExceeded, KeyPrefixCollision, XmlReadError
from .reader import from_etree, parse_xml
from .tree import Attribute, CData, Element, Text
from .values import JsonArray, JsonNull, JsonObject, JsonString, JsonValue, from_python

__all__ = [
    "Attribute",
    "CData",
    "ConversionConfig",
    "ConversionError",
    "DepthExceeded",
    "Element",
    "JsonArray",
    "JsonNull",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "KeyPrefixCollision",
    "Text",
    "XmlReadError",
    "convert",
    "convert_document",
    "from_etree",
    "from_python",
    "parse_xml",
    "xml_to_json",
]
