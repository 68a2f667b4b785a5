"""JSON contracts for tree documents and coverage reports."""

from __future__ import annotations

from .ids import COVERAGE_REPORT, ERROR, TREE
from .validate import validate, validate_file

__all__ = ["COVERAGE_REPORT", "ERROR", "TREE", "validate", "validate_file"]
