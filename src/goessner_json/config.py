from pydantic import BaseModel, ConfigDict, Field, field_validator

from goessner_json.constants import (
    ATTRIBUTE_PREFIX,
    CDATA_KEY,
    MAX_DEPTH,
    NAMESPACE_SEPARATOR,
    TEXT_KEY,
)


class ConversionConfig(BaseModel):
    """Options for one conversion call. Defaults follow Goessner's mapping."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attribute_prefix: str = ATTRIBUTE_PREFIX
    text_key: str = TEXT_KEY
    cdata_key: str = CDATA_KEY
    collapse_single_child_text: bool = True
    namespace_separator: str = NAMESPACE_SEPARATOR
    max_depth: int = Field(MAX_DEPTH, ge=1)
    # Raise KeyPrefixCollision instead of last-write-wins.
    strict: bool = False

    @field_validator("text_key", "cdata_key", "namespace_separator")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


DEFAULT_CONFIG = ConversionConfig()
