"""Test JSON text rendering."""

import json

from goessner_json.engine import xml_to_json
from goessner_json.serialize import dump, dumps
from goessner_json.values import JsonNull


def test_dumps_keeps_key_order():
    doc = xml_to_json('<a z="1"><y>2</y>t</a>')
    assert dumps(doc) == '{"a": {"@z": "1", "y": "2", "#text": "t"}}'


def test_dumps_null_and_indent():
    assert dumps(JsonNull()) == "null"
    assert dumps(xml_to_json("<a><b/></a>"), indent=2) == '{\n  "a": {\n    "b": null\n  }\n}'


def test_dumps_ascii_switch():
    doc = xml_to_json("<a>café</a>")
    assert dumps(doc) == '{"a": "café"}'
    assert dumps(doc, ensure_ascii=True) == '{"a": "caf\\u00e9"}'


def test_dump_creates_parents(tmp_path):
    target = tmp_path / "nested" / "dir" / "out.json"
    written = dump(xml_to_json("<a>1</a>"), target)
    assert written == target
    assert json.loads(target.read_text(encoding="utf-8")) == {"a": "1"}
