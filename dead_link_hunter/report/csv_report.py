# dead_link_hunter/report/csv_report.py
"""CSV export: one row per dead link, grouped by referring page."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

from dead_link_hunter.aggregator import DeadLinkReport
from dead_link_hunter.report.paths import with_default_suffix

HEADER = ("Page", "Counts", "Dead Links")


def render_csv(report: DeadLinkReport, output_path: Union[Path, str]) -> Path:
    """Write *report* as CSV; page and count appear only on each page's first row."""
    output = with_default_suffix(output_path, ".csv")
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerows(report.rows())

    return output
