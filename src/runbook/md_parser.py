"""Parser for manual test-case markdown documents.

Extracts a document title and an ordered list of TestCase records from
loosely formatted markdown:

    # Combat System - Manual Test Cases

    ## Test Case 1: Player attacks mob
    **Prerequisites**: Survival world
    **Steps**:
    1. Spawn a zombie
    2. Hit it with a sword
    **Expected Result**: Zombie takes damage
    **Edge Cases**:
    - Attack during cooldown

Single linear pass over trimmed lines:
    1. A ``## Test Case N: <title>`` heading closes the open case and opens
       a new one.
    2. A bold section label selects the field that following lines feed;
       text after the label's colon replaces the field's content.
    3. Other non-empty lines are appended to the selected field with one
       list marker stripped.

Lines before the first case heading are ignored. The parser never raises;
unrecognised text simply produces empty fields or no cases.
"""
from __future__ import annotations

import re
from dataclasses import replace

from runbook.case_types import ParsedDocument, TestCase

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

_TITLE_RE = re.compile(r"^#\s+(.+?)(?:\s+-\s+Manual Test Cases)?$")
_CASE_HEADING_RE = re.compile(r"^##\s+Test\s+Case\s+\d+:\s+(.+)$", re.IGNORECASE)
_LIST_MARKER_RE = re.compile(r"^(?:\d+\.\s+|-\s+)")
_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")

# Label prefix -> TestCase field. Exact casing, colon included.
_SECTION_LABELS: tuple[tuple[str, str], ...] = (
    ("**Prerequisites**:", "prerequisites"),
    ("**Steps**:", "steps"),
    ("**Expected Result**:", "expected"),
    ("**Edge Cases**:", "edge_cases"),
)


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


def extract_title(text: str, doc_id: str) -> str:
    """Return the first ``# <title>`` line's text, or *doc_id* if none.

    A trailing `` - Manual Test Cases`` suffix is dropped.
    """
    for raw in _LINE_SPLIT_RE.split(text):
        m = _TITLE_RE.match(raw.strip())
        if m:
            return m.group(1)
    return doc_id


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


def _match_label(line: str) -> tuple[str, str] | None:
    """Return (field, inline_text) if *line* starts with a section label."""
    for label, field in _SECTION_LABELS:
        if line.startswith(label):
            return field, line[len(label):].strip()
    return None


def strip_list_marker(line: str) -> str:
    """Remove one leading ``1. `` or ``- `` marker from *line*."""
    return _LIST_MARKER_RE.sub("", line, count=1)


def _append(case: TestCase, field: str, text: str) -> TestCase:
    existing: str = getattr(case, field)
    joined = f"{existing}\n{text}" if existing else text
    return replace(case, **{field: joined})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_test_cases(text: str, doc_id: str) -> tuple[TestCase, ...]:
    """Extract test cases from *text* in source order.

    Ids are ``f"{doc_id}-{n}"`` where n counts emitted cases; the number
    written in the heading is ignored.
    """
    finished: list[TestCase] = []
    current: TestCase | None = None
    section: str | None = None

    for raw in _LINE_SPLIT_RE.split(text):
        line = raw.strip()

        heading = _CASE_HEADING_RE.match(line)
        if heading:
            if current is not None:
                finished.append(current)
            ordinal = len(finished) + 1
            current = TestCase(id=f"{doc_id}-{ordinal}", title=heading.group(1))
            section = None
            continue

        if current is None:
            continue

        label = _match_label(line)
        if label is not None:
            section, inline = label
            if inline:
                current = replace(current, **{section: inline})
            continue

        if section is not None and line:
            current = _append(current, section, strip_list_marker(line))

    if current is not None:
        finished.append(current)
    return tuple(finished)


def parse(text: str, doc_id: str) -> ParsedDocument:
    """Parse one markdown document into its title and test cases."""
    return ParsedDocument(
        title=extract_title(text, doc_id),
        tests=parse_test_cases(text, doc_id),
    )
