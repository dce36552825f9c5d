"""Tests for runbook.discovery module."""
from pathlib import Path

import pytest

from runbook.discovery import (
    build_suites,
    document_id_for,
    find_markdown_files,
    load_suite,
)

COMBAT_MD = """\
# Combat System - Manual Test Cases

## Test Case 1: Player attacks mob
**Steps**:
1. Spawn a zombie
2. Hit it

## Test Case 2: Bow damage
**Expected Result**: Skeleton takes damage
"""

PORTAL_MD = """\
# Nether Portals

## Test Case 1: Light a portal
**Prerequisites**: Flint and steel
"""


def _write_docs(root: Path) -> None:
    (root / "combat-system.md").write_text(COMBAT_MD, encoding="utf-8")
    (root / "nether-portals.md").write_text(PORTAL_MD, encoding="utf-8")
    (root / "README.txt").write_text("# not markdown", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "nested.md").write_text(PORTAL_MD, encoding="utf-8")


class TestFindMarkdownFiles:
    def test_sorted_md_only(self, tmp_path: Path) -> None:
        _write_docs(tmp_path)
        names = [p.name for p in find_markdown_files(tmp_path)]
        assert names == ["combat-system.md", "nether-portals.md"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert find_markdown_files(tmp_path) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_markdown_files(tmp_path / "nope")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        f = tmp_path / "file.md"
        f.write_text("x")
        with pytest.raises(NotADirectoryError):
            find_markdown_files(f)


class TestDocumentId:
    def test_strips_md(self) -> None:
        assert document_id_for(Path("manual-tests/Combat System.md")) == "Combat System"

    def test_only_last_suffix(self) -> None:
        assert document_id_for(Path("v1.2.md")) == "v1.2"


class TestLoadSuite:
    def test_parses_file(self, tmp_path: Path) -> None:
        _write_docs(tmp_path)
        suite = load_suite(tmp_path / "combat-system.md")
        assert suite.id == "combat-system"
        assert suite.title == "Combat System"
        assert [t.id for t in suite.tests] == ["combat-system-1", "combat-system-2"]
        assert suite.tests[0].steps == "Spawn a zombie\nHit it"
        assert suite.tests[1].expected == "Skeleton takes damage"

    def test_suite_id_lowercases_file_name(self, tmp_path: Path) -> None:
        p = tmp_path / "Respawn Flow.md"
        p.write_text("## Test Case 1: Die\n", encoding="utf-8")
        suite = load_suite(p)
        assert suite.id == "respawn-flow"
        assert suite.title == "Respawn Flow"
        assert suite.tests[0].id == "Respawn Flow-1"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_suite(tmp_path / "gone.md")


class TestBuildSuites:
    def test_sequential_order(self, tmp_path: Path) -> None:
        _write_docs(tmp_path)
        suites = build_suites(find_markdown_files(tmp_path))
        assert [s.id for s in suites] == ["combat-system", "nether-portals"]

    def test_parallel_preserves_order(self, tmp_path: Path) -> None:
        paths = []
        for i in range(6):
            p = tmp_path / f"doc{i}.md"
            p.write_text(f"# Doc {i}\n## Test Case 1: only\n", encoding="utf-8")
            paths.append(p)
        paths.reverse()
        suites = build_suites(paths, workers=3)
        assert [s.id for s in suites] == [f"doc{i}" for i in range(5, -1, -1)]
        assert build_suites(paths, workers=3) == build_suites(paths)

    def test_empty(self) -> None:
        assert build_suites([], workers=4) == []
