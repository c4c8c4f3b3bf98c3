# src/goessner_json/settings.py
import os

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from goessner_json.config import ConversionConfig
from goessner_json.constants import JSON_ENCODING


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"  # "json" or "human"
    structured: bool = True


class OutputConfig(BaseModel):
    indent: int | None = 2
    ensure_ascii: bool = False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GOESSNER_JSON_",
        env_nested_delimiter="__",
        extra="ignore",
    )
    conversion: ConversionConfig = ConversionConfig()
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment beats values read from YAML (passed in as init kwargs).
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @staticmethod
    def _deep_update(d: dict, u: dict) -> dict:
        # Recursively update dict d with values from u
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                d[k] = Settings._deep_update(d[k], v)
            else:
                d[k] = v
        return d

    @staticmethod
    def _read_yaml(path: str) -> dict:
        if not os.path.exists(path):
            return {}
        with open(path, "r", encoding=JSON_ENCODING) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load(path: str) -> "Settings":
        """Load `base.yaml` next to `path`, then merge `path` on top.

        Missing files contribute nothing, so a bare install runs on defaults.
        """
        base = Settings._read_yaml(os.path.join(os.path.dirname(path), "base.yaml"))
        override = Settings._read_yaml(path)
        merged = Settings._deep_update(base, override)
        return Settings(**merged)


def load_settings(env: str = "dev") -> Settings:
    """Settings for an environment name; GOESSNER_JSON_CONFIG points at an explicit file."""
    cfg_path = os.getenv("GOESSNER_JSON_CONFIG", f"configs/{env}.yaml")
    return Settings.load(cfg_path)
