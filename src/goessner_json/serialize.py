"""Render JSON values as text."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from goessner_json.constants import JSON_ENCODING
from goessner_json.values import JsonValue


def dumps(value: JsonValue, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    return json.dumps(value.to_python(), ensure_ascii=ensure_ascii, indent=indent)


def dump(
    value: JsonValue,
    path: Union[str, Path],
    indent: Optional[int] = 2,
    ensure_ascii: bool = False,
) -> Path:
    """Write `value` to `path` as UTF-8 JSON, creating parent directories."""
    outp = Path(path)
    outp.parent.mkdir(parents=True, exist_ok=True)
    with open(outp, "w", encoding=JSON_ENCODING) as fh:
        json.dump(value.to_python(), fh, ensure_ascii=ensure_ascii, indent=indent)
        fh.write("\n")
    return outp
