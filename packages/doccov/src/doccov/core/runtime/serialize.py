"""Canonical JSON serialization for report and error payloads."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return value.as_posix()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def dumps_json(payload: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, sort_keys=True, default=_encode)
    return json.dumps(payload, sort_keys=True, default=_encode)
