"""Test building the XML tree from text and from ElementTree."""

import io
import xml.etree.ElementTree as ET

import pytest

from goessner_json.engine import convert
from goessner_json.errors import XmlReadError
from goessner_json.reader import from_etree, parse_xml
from goessner_json.tree import Attribute, CData, Element, Text


def test_parse_keeps_interleaved_children():
    root = parse_xml("<a>one<b/>two<![CDATA[three]]></a>")
    assert root.name == "a"
    assert root.children == (
        Text("one"),
        Element("b"),
        Text("two"),
        CData("three"),
    )


def test_parse_splits_prefixes():
    root = parse_xml('<s:Envelope xmlns:s="urn:soap" s:mustUnderstand="1"/>')
    assert root.prefix == "s"
    assert root.name == "Envelope"
    assert root.attributes == (
        Attribute("s", "urn:soap", "xmlns"),
        Attribute("mustUnderstand", "1", "s"),
    )


def test_parse_attribute_order():
    root = parse_xml('<a c="3" a="1" b="2"/>')
    assert [a.name for a in root.attributes] == ["c", "a", "b"]


def test_parse_merges_character_data_and_entities():
    root = parse_xml("<a>fish &amp; chips &#233;</a>")
    assert root.children == (Text("fish & chips é"),)


def test_parse_ignores_comments_and_pis():
    root = parse_xml("<?xml version='1.0'?><!-- c --><a><!-- inner --><?pi x?>t</a>")
    assert root.children == (Text("t"),)


def test_parse_bytes_with_declared_encoding():
    data = '<?xml version="1.0" encoding="ISO-8859-1"?><a>café</a>'.encode("latin-1")
    assert parse_xml(data).children == (Text("café"),)


def test_parse_file_object():
    root = parse_xml(io.BytesIO(b"<a><b>1</b></a>"))
    assert convert(root).to_python() == {"b": "1"}


def test_parse_malformed_raises():
    with pytest.raises(XmlReadError) as exc:
        parse_xml("<a><b></a>")
    assert exc.value.line == 1


def test_parse_empty_input_raises():
    with pytest.raises(XmlReadError):
        parse_xml("")


def test_parse_refuses_entity_declarations():
    xml = '<!DOCTYPE a [<!ENTITY e "boom">]><a>&e;</a>'
    with pytest.raises(XmlReadError):
        parse_xml(xml)


def test_from_etree_text_and_tails():
    el = ET.fromstring("<a>x<b>1</b>y<c/>z</a>")
    root = from_etree(el)
    assert root.children == (
        Text("x"),
        Element("b", children=[Text("1")]),
        Text("y"),
        Element("c"),
        Text("z"),
    )


def test_from_etree_namespaces():
    el = ET.fromstring('<r xmlns:p="urn:p" xml:lang="en"><p:i>1</p:i><q xmlns="urn:q"/></r>')
    root = from_etree(el, namespaces={"urn:p": "p"})
    result = convert(root).to_python()
    assert result["@xml:lang"] == "en"
    assert result["p:i"] == "1"
    # Unmapped namespace stays in Clark notation.
    assert "{urn:q}q" in result


def test_from_etree_empty_prefix_drops_namespace():
    el = ET.fromstring('<r xmlns="urn:d"><i>1</i></r>')
    root = from_etree(el, namespaces={"urn:d": ""})
    assert root.name == "r"
    assert convert(root).to_python() == {"i": "1"}


def test_from_etree_skips_comments():
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    el = ET.fromstring("<a>x<!-- c -->y</a>", parser=parser)
    assert convert(from_etree(el)).to_python() == "xy"


def test_from_etree_deep_tree():
    el = ET.Element("n")
    cur = el
    for _ in range(3000):
        cur = ET.SubElement(cur, "n")
    root = from_etree(el)
    assert root.name == "n"
