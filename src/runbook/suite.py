"""Suite aggregation: one parsed document -> one serializable Suite."""
from __future__ import annotations

import re
from collections.abc import Iterable

from runbook.case_types import ParsedDocument, Suite, SuiteStats

_WHITESPACE_RE = re.compile(r"\s+")


def suite_id(doc_id: str) -> str:
    """Lowercase *doc_id* and collapse whitespace runs to single hyphens.

    >>> suite_id("Combat System")
    'combat-system'
    """
    return _WHITESPACE_RE.sub("-", doc_id.lower())


def build_suite(doc_id: str, parsed: ParsedDocument) -> Suite:
    """Wrap a parsed document as a Suite. Title and tests pass through."""
    return Suite(id=suite_id(doc_id), title=parsed.title, tests=parsed.tests)


def suite_stats(suites: Iterable[Suite]) -> SuiteStats:
    """Count suites and test cases across *suites*."""
    n_suites = 0
    n_tests = 0
    for s in suites:
        n_suites += 1
        n_tests += len(s.tests)
    return SuiteStats(suites=n_suites, tests=n_tests)
