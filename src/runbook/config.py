"""Report configuration: defaults, optional JSON file, keyword overrides."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, cast

from runbook.io_utils import load_json


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Text shown around the suites in the generated report."""

    page_title: str = "Manual Test Runner"
    heading: str = "Manual Test Runner"
    subtitle: str = "Track your manual testing progress"
    footer_title: str = ""
    footer_text: str = "Generated from markdown test files"
    output_name: str = "test-runner.html"


_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(ReportConfig))


def _validate(raw: dict[str, Any], source: str) -> dict[str, str]:
    unknown = sorted(set(raw) - _FIELD_NAMES)
    if unknown:
        raise ValueError(f"{source}: unknown config keys {unknown}")
    out: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValueError(
                f"{source}: '{key}' must be a string, got {type(value).__name__}"
            )
        out[key] = value
    return out


def load_report_config(
    path: Path | None = None,
    **overrides: str | None,
) -> ReportConfig:
    """Build a ReportConfig from defaults, *path* (JSON object), then overrides.

    Overrides whose value is None are ignored, so argparse defaults can be
    passed straight through.

    Raises:
        ValueError: unknown keys, non-string values, or a non-object JSON file.
        OSError: *path* cannot be read.
    """
    cfg = ReportConfig()
    if path is not None:
        data = load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: config must be a JSON object")
        cfg = replace(cfg, **_validate(cast(dict[str, Any], data), str(path)))
    given = {k: v for k, v in overrides.items() if v is not None}
    if given:
        cfg = replace(cfg, **_validate(given, "overrides"))
    return cfg
