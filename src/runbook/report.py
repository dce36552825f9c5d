"""Render Suites into a self-contained interactive HTML report.

The page embeds the suites as JSON and a small client script that shows
one collapsible block per suite, a checkbox per test case, and running
totals. Completion state exists only while the page is open.
"""
from __future__ import annotations

import html
import re
from collections.abc import Sequence
from typing import Any

from runbook.case_types import Suite
from runbook.config import ReportConfig
from runbook.io_utils import dumps_json
from runbook.suite import suite_stats

_TOKEN_RE = re.compile(
    r"__(?:PAGE_TITLE|HEADING|SUBTITLE|FOOTER_TITLE|FOOTER_TEXT"
    r"|TOTAL_TESTS|SUITES_JSON)__"
)


def serialize_suites(suites: Sequence[Suite]) -> str:
    """JSON for embedding inside a ``<script>`` element.

    Every ``<`` is written as ``\\u003c`` so document text can never close
    the script element early.
    """
    payload: list[dict[str, Any]] = [s.to_dict() for s in suites]
    return dumps_json(payload).replace("<", "\\u003c")


def render_report(
    suites: Sequence[Suite],
    config: ReportConfig | None = None,
) -> str:
    """Return the complete HTML document for *suites*."""
    cfg = config or ReportConfig()
    stats = suite_stats(suites)
    footer_title = (
        f"<p><strong>{html.escape(cfg.footer_title)}</strong></p>"
        if cfg.footer_title else ""
    )
    replacements = {
        "__PAGE_TITLE__": html.escape(cfg.page_title),
        "__HEADING__": html.escape(cfg.heading),
        "__SUBTITLE__": html.escape(cfg.subtitle),
        "__FOOTER_TITLE__": footer_title,
        "__FOOTER_TEXT__": html.escape(cfg.footer_text),
        "__TOTAL_TESTS__": str(stats.tests),
        "__SUITES_JSON__": serialize_suites(suites),
    }
    # Single pass: inserted text is never rescanned for tokens.
    return _TOKEN_RE.sub(lambda m: replacements[m.group(0)], _TEMPLATE)


_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__PAGE_TITLE__</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            padding: 20px;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            box-shadow: 0 10px 40px rgba(0, 0, 0, 0.2);
            overflow: hidden;
        }
        header {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 30px;
            text-align: center;
        }
        header h1 { font-size: 2.5em; margin-bottom: 10px; }
        header p { font-size: 1.1em; opacity: 0.9; }
        .stats {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 20px;
            padding: 30px;
            background: #f8f9fa;
            border-bottom: 3px solid #667eea;
        }
        .stat-card {
            background: white;
            padding: 20px;
            border-radius: 8px;
            box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
            text-align: center;
        }
        .stat-card .label {
            color: #6c757d;
            font-size: 0.9em;
            text-transform: uppercase;
            letter-spacing: 1px;
            margin-bottom: 8px;
        }
        .stat-card .value { color: #667eea; font-size: 2.5em; font-weight: bold; }
        .progress-bar {
            background: #e9ecef;
            height: 30px;
            border-radius: 15px;
            overflow: hidden;
            margin: 0 30px 30px 30px;
        }
        .progress-fill {
            background: linear-gradient(90deg, #667eea 0%, #764ba2 100%);
            height: 100%;
            transition: width 0.3s ease;
            display: flex;
            align-items: center;
            justify-content: center;
            color: white;
            font-weight: bold;
            font-size: 0.9em;
        }
        .test-suites { padding: 30px; }
        .test-suite {
            margin-bottom: 30px;
            border: 2px solid #e9ecef;
            border-radius: 8px;
            overflow: hidden;
        }
        .suite-header {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 15px 20px;
            cursor: pointer;
            display: flex;
            justify-content: space-between;
            align-items: center;
            user-select: none;
        }
        .suite-header:hover {
            background: linear-gradient(135deg, #5568d3 0%, #653a8a 100%);
        }
        .suite-header h2 { font-size: 1.3em; }
        .suite-progress {
            background: rgba(255, 255, 255, 0.3);
            padding: 4px 12px;
            border-radius: 12px;
            font-size: 0.9em;
        }
        .suite-content { display: none; padding: 20px; background: white; }
        .suite-content.expanded { display: block; }
        .test-case {
            background: #f8f9fa;
            border: 1px solid #dee2e6;
            border-radius: 6px;
            padding: 20px;
            margin-bottom: 15px;
        }
        .test-header { display: flex; align-items: center; margin-bottom: 15px; }
        .test-checkbox {
            width: 24px;
            height: 24px;
            margin-right: 15px;
            cursor: pointer;
            accent-color: #667eea;
        }
        .test-title { font-size: 1.2em; font-weight: bold; color: #333; }
        .test-section { margin-bottom: 12px; }
        .test-section strong { color: #667eea; display: block; margin-bottom: 5px; }
        .test-section p { color: #495057; line-height: 1.6; white-space: pre-wrap; }
        .test-case.completed { opacity: 0.7; background: #e7f5e7; }
        .test-case.completed .test-title { text-decoration: line-through; color: #28a745; }
        footer {
            background: #f8f9fa;
            padding: 20px;
            text-align: center;
            color: #6c757d;
            border-top: 2px solid #e9ecef;
        }
        @media (max-width: 768px) {
            header h1 { font-size: 1.8em; }
            .stats { grid-template-columns: 1fr 1fr; }
            .stat-card .value { font-size: 2em; }
        }
    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>__HEADING__</h1>
            <p>__SUBTITLE__</p>
        </header>

        <div class="stats">
            <div class="stat-card">
                <div class="label">Total Tests</div>
                <div class="value" id="totalTests">__TOTAL_TESTS__</div>
            </div>
            <div class="stat-card">
                <div class="label">Completed</div>
                <div class="value" id="completedTests">0</div>
            </div>
            <div class="stat-card">
                <div class="label">Remaining</div>
                <div class="value" id="remainingTests">__TOTAL_TESTS__</div>
            </div>
            <div class="stat-card">
                <div class="label">Progress</div>
                <div class="value" id="progressPercent">0%</div>
            </div>
        </div>

        <div class="progress-bar">
            <div class="progress-fill" id="progressFill" style="width: 0%">0%</div>
        </div>

        <div class="test-suites" id="testSuites"></div>

        <footer>
            __FOOTER_TITLE__
            <p>__FOOTER_TEXT__</p>
        </footer>
    </div>

    <script id="suite-data" type="application/json">__SUITES_JSON__</script>
    <script>
        const testSuites = JSON.parse(document.getElementById('suite-data').textContent);

        const state = {
            completed: new Set(),
            expanded: new Set()
        };

        const SECTIONS = [
            ['prerequisites', 'Prerequisites'],
            ['steps', 'Steps'],
            ['expected', 'Expected Result'],
            ['edgeCases', 'Edge Cases']
        ];

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text;
            return div.innerHTML.replace(/"/g, '&quot;');
        }

        function createTestCase(test) {
            const isCompleted = state.completed.has(test.id);
            const sections = SECTIONS
                .filter(([key]) => test[key])
                .map(([key, label]) => `
                    <div class="test-section">
                        <strong>${label}:</strong>
                        <p>${escapeHtml(test[key])}</p>
                    </div>`)
                .join('');
            return `
                <div class="test-case ${isCompleted ? 'completed' : ''}">
                    <div class="test-header">
                        <input type="checkbox" class="test-checkbox"
                               data-test-id="${escapeHtml(test.id)}"
                               ${isCompleted ? 'checked' : ''}>
                        <span class="test-title">${escapeHtml(test.title)}</span>
                    </div>
                    ${sections}
                </div>`;
        }

        function createTestSuite(suite) {
            const div = document.createElement('div');
            div.className = 'test-suite';
            const completed = suite.tests.filter(t => state.completed.has(t.id)).length;
            const isExpanded = state.expanded.has(suite.id);
            div.innerHTML = `
                <div class="suite-header" data-suite-id="${escapeHtml(suite.id)}">
                    <h2>${escapeHtml(suite.title)}</h2>
                    <span class="suite-progress">${completed}/${suite.tests.length}</span>
                </div>
                <div class="suite-content ${isExpanded ? 'expanded' : ''}">
                    ${suite.tests.map(createTestCase).join('')}
                </div>`;
            return div;
        }

        function renderTestSuites() {
            const container = document.getElementById('testSuites');
            container.innerHTML = '';
            testSuites.forEach(suite => container.appendChild(createTestSuite(suite)));
        }

        function updateStats() {
            const total = testSuites.reduce((sum, suite) => sum + suite.tests.length, 0);
            const completed = state.completed.size;
            const percent = total > 0 ? Math.round((completed / total) * 100) : 0;
            document.getElementById('totalTests').textContent = total;
            document.getElementById('completedTests').textContent = completed;
            document.getElementById('remainingTests').textContent = total - completed;
            document.getElementById('progressPercent').textContent = percent + '%';
            const fill = document.getElementById('progressFill');
            fill.style.width = percent + '%';
            fill.textContent = percent + '%';
        }

        function toggle(set, key) {
            if (set.has(key)) {
                set.delete(key);
            } else {
                set.add(key);
            }
        }

        document.getElementById('testSuites').addEventListener('click', event => {
            const header = event.target.closest('.suite-header');
            if (!header) return;
            toggle(state.expanded, header.dataset.suiteId);
            header.nextElementSibling.classList.toggle('expanded');
        });

        document.getElementById('testSuites').addEventListener('change', event => {
            const box = event.target;
            if (!box.classList.contains('test-checkbox')) return;
            toggle(state.completed, box.dataset.testId);
            renderTestSuites();
            updateStats();
        });

        renderTestSuites();
        updateStats();
    </script>
</body>
</html>
"""
