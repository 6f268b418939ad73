# dead_link_hunter/report/json_report.py

"""
JSON export for Dead Link Hunter.

One record per referring page: ``{"Page", "Counts", "Dead Links"}``.
"""
import json
from pathlib import Path

from dead_link_hunter.aggregator import DeadLinkReport
from dead_link_hunter.report.paths import with_default_suffix


def render_json(report: DeadLinkReport, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path* (``.json`` is added when the path has no suffix).

    :param report: result of a hunt
    :param output_path: destination file
    :return: Path of the written file

    Example:
    ```python
    from dead_link_hunter.report.json_report import render_json
    report_path = render_json(report, 'reports/result')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = with_default_suffix(output_path, ".json")
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.records(), f, ensure_ascii=False, indent=2)

    return output
