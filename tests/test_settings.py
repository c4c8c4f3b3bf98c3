"""Test settings loading and environment overrides."""

import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from goessner_json.config import ConversionConfig
from goessner_json.settings import Settings, load_settings

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_follow_goessner():
    cfg = ConversionConfig()
    assert cfg.attribute_prefix == "@"
    assert cfg.text_key == "#text"
    assert cfg.cdata_key == "#cdata"
    assert cfg.collapse_single_child_text is True
    assert cfg.namespace_separator == ":"
    assert cfg.strict is False


def test_config_is_immutable():
    cfg = ConversionConfig()
    with pytest.raises(ValidationError):
        cfg.text_key = "other"


def test_config_validation():
    with pytest.raises(ValidationError):
        ConversionConfig(max_depth=0)
    with pytest.raises(ValidationError):
        ConversionConfig(text_key="")
    with pytest.raises(ValidationError):
        ConversionConfig(namespace_separator="")
    with pytest.raises(ValidationError):
        ConversionConfig(unknown_option=True)
    # An empty attribute prefix is allowed.
    assert ConversionConfig(attribute_prefix="").attribute_prefix == ""


def test_load_repo_configs():
    dev = Settings.load(str(REPO_ROOT / "configs" / "dev.yaml"))
    prod = Settings.load(str(REPO_ROOT / "configs" / "prod.yaml"))

    assert dev.logging.format == "human"
    assert dev.conversion.strict is False
    assert dev.output.indent == 2

    assert prod.logging.format == "json"
    assert prod.conversion.strict is True
    assert prod.output.indent is None
    # Untouched keys come from base.yaml
    assert prod.conversion.text_key == "#text"


def test_load_merges_base_and_override():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        (temp_path / "base.yaml").write_text(
            "conversion:\n  text_key: '$'\n  cdata_key: '$c'\n", encoding="utf-8"
        )
        (temp_path / "test.yaml").write_text(
            "conversion:\n  cdata_key: '#c'\n", encoding="utf-8"
        )
        s = Settings.load(str(temp_path / "test.yaml"))
        assert s.conversion.text_key == "$"
        assert s.conversion.cdata_key == "#c"


def test_missing_files_fall_back_to_defaults():
    with tempfile.TemporaryDirectory() as temp_dir:
        s = Settings.load(os.path.join(temp_dir, "nope.yaml"))
        assert s.conversion == ConversionConfig()
        assert s.logging.level == "INFO"


def test_environment_overrides_yaml(monkeypatch):
    monkeypatch.setenv("GOESSNER_JSON_CONVERSION__ATTRIBUTE_PREFIX", "-")
    monkeypatch.setenv("GOESSNER_JSON_LOGGING__LEVEL", "ERROR")
    s = Settings.load(str(REPO_ROOT / "configs" / "dev.yaml"))
    assert s.conversion.attribute_prefix == "-"
    assert s.logging.level == "ERROR"
    # Other values still come from the YAML files.
    assert s.logging.format == "human"


def test_load_settings_uses_explicit_config(monkeypatch):
    monkeypatch.setenv("GOESSNER_JSON_CONFIG", str(REPO_ROOT / "configs" / "prod.yaml"))
    assert load_settings("dev").conversion.strict is True
