from __future__ import annotations

TREE = "doccov.tree.v1"
COVERAGE_REPORT = "doccov.coverage-report.v1"
ERROR = "doccov.error.v1"
