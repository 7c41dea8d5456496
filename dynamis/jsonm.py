"""A JSON record that collects measurements, turning repeated keys into lists."""

from __future__ import annotations

import copy
import json
import sys
from pathlib import Path
from typing import Any, TextIO


def _plain(value: Any) -> Any:
    if isinstance(value, JsonRecord):
        return copy.deepcopy(value.data)
    return value


def _merge(target: dict, key: str, value: Any) -> None:
    if key not in target:
        target[key] = value
    elif isinstance(target[key], list):
        target[key].append(value)
    else:
        target[key] = [target[key], value]


class JsonRecord:
    """A JSON object where adding to an existing key accumulates values."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def add_element(self, key: str, value: Any) -> None:
        """Add a value (string or record) under key."""
        _merge(self.data, key, _plain(value))

    def add_nested(self, key1: str, key2: str, value: Any) -> None:
        """Add a value under key2 inside the object stored at key1."""
        item = self.data.setdefault(key1, {})
        if not isinstance(item, dict):
            raise TypeError(f"value at {key1!r} is not an object")
        _merge(item, key2, _plain(value))

    def dumps(self) -> str:
        """Compact JSON text with keys in sorted order."""
        return json.dumps(
            self.data, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )

    def print(self, stream: TextIO | None = None) -> None:
        """Write the JSON text to a stream, standard output by default."""
        (stream or sys.stdout).write(self.dumps())

    def output(self, out_folder: str, appendix: str, out_file: str) -> Path:
        """Write the record to <out_folder>/RESULT/<out_file><appendix>."""
        path = Path(f"{out_folder}/RESULT/{out_file}{appendix}")
        path.write_text(self.dumps(), encoding="utf-8")
        return path