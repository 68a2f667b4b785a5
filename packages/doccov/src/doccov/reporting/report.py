from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Sequence

from ..contracts.ids import COVERAGE_REPORT
from ..contracts.validate import validate
from ..core.model import CoverageReport
from ..core.visitor import LINT


def report_rows(reports: Iterable[CoverageReport]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for report in reports:
        rows.append(
            {
                "file": report.span.file,
                "line": report.span.line,
                "column": report.span.column,
                "lo": report.span.lo,
                "hi": report.span.hi,
                "label": report.label,
                "message": report.message,
                "lint": report.lint,
                "name": report.node_name,
            }
        )
    return rows


def build_report_payload(
    reports: Sequence[CoverageReport],
    *,
    run_id: str = "",
    source: str = "",
    test_harness: bool = False,
) -> dict[str, Any]:
    # rows keep traversal (source) order
    payload: dict[str, Any] = {
        "schema_name": COVERAGE_REPORT,
        "schema_version": 1,
        "tool": "doccov",
        "kind": "coverage-report",
        "run_id": run_id,
        "source": source,
        "test_harness": bool(test_harness),
        "lint": {"id": LINT.lint_id, "category": LINT.category, "description": LINT.description},
        "status": "fail" if reports else "pass",
        "summary": {"total": len(reports), "by_label": dict(sorted(Counter(r.label for r in reports).items()))},
        "rows": report_rows(reports),
    }
    validate(COVERAGE_REPORT, payload)
    return payload


def _location(report: CoverageReport) -> str:
    span = report.span
    where = span.file or "<unknown>"
    if span.line:
        where = f"{where}:{span.line}:{span.column}"
    return where


def render_text(reports: Sequence[CoverageReport]) -> str:
    lines = [f"{_location(r)}: warning: {r.message} [{r.lint}]" for r in reports]
    if reports:
        lines.append(f"doccov: {len(reports)} undocumented item(s)")
    else:
        lines.append("doccov: documentation coverage check passed")
    return "\n".join(lines)
