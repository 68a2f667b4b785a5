from __future__ import annotations

from .report import build_report_payload, render_text, report_rows

__all__ = ["build_report_payload", "render_text", "report_rows"]
