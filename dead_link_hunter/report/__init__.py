"""dead_link_hunter.report: exporters (CSV, JSON, HTML) and the console table used by the CLI."""

from __future__ import annotations

from dead_link_hunter.report.console import print_report
from dead_link_hunter.report.csv_report import render_csv
from dead_link_hunter.report.html_report import render_html
from dead_link_hunter.report.json_report import render_json

__all__ = ["render_csv", "render_json", "render_html", "print_report"]
