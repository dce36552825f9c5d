"""Value records shared by the parser, aggregator and report renderer.

Type hierarchy:
  TestCase       — One manual test case extracted from a document
  ParsedDocument — Title plus ordered test cases of one document
  Suite          — Serializable form of one document, handed to rendering
  SuiteStats     — Totals across a list of suites

All records are frozen; the parser builds a new TestCase instead of
editing one in place.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TestCase:
    """A single manual test case (e.g., ``## Test Case 3: Respawn``)."""

    __test__ = False  # not a pytest class

    id: str             # "<doc_id>-<n>", n is the 1-based emission ordinal
    title: str
    prerequisites: str = ""
    steps: str = ""
    expected: str = ""
    edge_cases: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the key layout read by the report's client script."""
        return {
            "id": self.id,
            "title": self.title,
            "prerequisites": self.prerequisites,
            "steps": self.steps,
            "expected": self.expected,
            "edgeCases": self.edge_cases,
        }


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Parser output for one document."""

    title: str
    tests: tuple[TestCase, ...]


@dataclass(frozen=True, slots=True)
class Suite:
    """One document's test cases, ready for serialization."""

    id: str
    title: str
    tests: tuple[TestCase, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "tests": [t.to_dict() for t in self.tests],
        }


@dataclass(frozen=True, slots=True)
class SuiteStats:
    suites: int
    tests: int
