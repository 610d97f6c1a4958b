# File: appcast_scout/report/__init__.py
"""appcast_scout.report: JSON and HTML report writers used by the CLI."""

from __future__ import annotations

from appcast_scout.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from appcast_scout.report.json_report import render_json

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
