"""I/O utilities for JSON and text file operations.

orjson handles all JSON encoding. Text reads fall back through encodings
so that documents saved by Windows editors (CP1252 smart quotes) still load.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def dumps_json(obj: Any, *, pretty: bool = True) -> str:
    """Serialize *obj* to a JSON string (2-space indent when *pretty*)."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(obj, option=opts).decode("utf-8")


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def read_text(fpath: Path) -> str:
    """Read a text file with encoding fallback: UTF-8 -> CP1252 -> replace.

    A leading UTF-8 byte-order mark is dropped. ``OSError`` propagates.
    """
    raw = fpath.read_bytes()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        try:
            return raw.decode("cp1252")
        except UnicodeDecodeError:
            return raw.decode("utf-8", errors="replace")


def write_text(text: str, path: Path) -> None:
    """Write UTF-8 text, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
