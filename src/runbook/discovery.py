"""Locate markdown test documents and turn them into Suites.

Document ids come from file names (``combat-system.md`` -> ``combat-system``).
Each document is independent, so ``build_suites`` can fan out over worker
processes; results always follow the order of the input paths.
"""
from __future__ import annotations

from collections.abc import Sequence
from multiprocessing import Pool
from pathlib import Path

from runbook.case_types import Suite
from runbook.io_utils import read_text
from runbook.md_parser import parse
from runbook.suite import build_suite

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(directory: Path) -> list[Path]:
    """Return ``*.md`` files directly inside *directory*, sorted by name.

    Raises:
        FileNotFoundError: *directory* does not exist.
        NotADirectoryError: *directory* is not a directory.
    """
    if not directory.exists():
        raise FileNotFoundError(f"directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"not a directory: {directory}")
    return sorted(
        (p for p in directory.iterdir()
         if p.is_file() and p.name.endswith(MARKDOWN_SUFFIX)),
        key=lambda p: p.name,
    )


def document_id_for(path: Path) -> str:
    """File name without the ``.md`` suffix."""
    name = path.name
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def load_suite(path: Path) -> Suite:
    """Read, parse and aggregate one markdown document. OSError propagates."""
    doc_id = document_id_for(path)
    return build_suite(doc_id, parse(read_text(path), doc_id))


def build_suites(paths: Sequence[Path], *, workers: int = 1) -> list[Suite]:
    """Load one Suite per path, preserving input order."""
    if workers <= 1 or len(paths) <= 1:
        return [load_suite(p) for p in paths]
    with Pool(processes=min(workers, len(paths))) as pool:
        return pool.map(load_suite, paths)
