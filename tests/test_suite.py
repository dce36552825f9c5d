"""Tests for runbook.suite and runbook.case_types modules."""
from runbook.case_types import ParsedDocument, Suite, SuiteStats, TestCase
from runbook.md_parser import parse
from runbook.suite import build_suite, suite_id, suite_stats


def _case(n: int, doc: str = "doc") -> TestCase:
    return TestCase(id=f"{doc}-{n}", title=f"Case {n}")


class TestSuiteId:
    def test_lowercase_and_hyphens(self) -> None:
        assert suite_id("Combat System") == "combat-system"

    def test_whitespace_runs_collapse(self) -> None:
        assert suite_id("Nether  \t Portals") == "nether-portals"

    def test_already_normalized(self) -> None:
        assert suite_id("respawn-flow") == "respawn-flow"

    def test_empty(self) -> None:
        assert suite_id("") == ""


class TestBuildSuite:
    def test_passes_title_and_tests_through(self) -> None:
        parsed = ParsedDocument(title="Combat", tests=(_case(1), _case(2)))
        suite = build_suite("Combat System", parsed)
        assert isinstance(suite, Suite)
        assert suite.id == "combat-system"
        assert suite.title == "Combat"
        assert suite.tests == parsed.tests

    def test_empty_document(self) -> None:
        suite = build_suite("Empty Doc", parse("", "Empty Doc"))
        assert suite.id == "empty-doc"
        assert suite.title == "Empty Doc"
        assert suite.tests == ()

    def test_case_ids_keep_raw_doc_id(self) -> None:
        suite = build_suite("Combat System", parse("## Test Case 1: A\n", "Combat System"))
        assert suite.id == "combat-system"
        assert suite.tests[0].id == "Combat System-1"


class TestToDict:
    def test_test_case_keys(self) -> None:
        case = TestCase(
            id="d-1", title="T", prerequisites="p", steps="s",
            expected="e", edge_cases="x",
        )
        assert case.to_dict() == {
            "id": "d-1",
            "title": "T",
            "prerequisites": "p",
            "steps": "s",
            "expected": "e",
            "edgeCases": "x",
        }

    def test_suite_dict(self) -> None:
        suite = Suite(id="d", title="Doc", tests=(_case(1),))
        d = suite.to_dict()
        assert d["id"] == "d"
        assert d["title"] == "Doc"
        assert d["tests"] == [_case(1).to_dict()]


class TestSuiteStats:
    def test_counts(self) -> None:
        suites = [
            Suite(id="a", title="A", tests=(_case(1, "a"), _case(2, "a"))),
            Suite(id="b", title="B", tests=()),
            Suite(id="c", title="C", tests=(_case(1, "c"),)),
        ]
        assert suite_stats(suites) == SuiteStats(suites=3, tests=3)

    def test_empty(self) -> None:
        assert suite_stats([]) == SuiteStats(suites=0, tests=0)

    def test_accepts_generator(self) -> None:
        gen = (Suite(id=str(i), title="", tests=(_case(1),)) for i in range(4))
        assert suite_stats(gen) == SuiteStats(suites=4, tests=4)
