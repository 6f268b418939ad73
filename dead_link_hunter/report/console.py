"""Console summary of a hunt, rendered as a rich table."""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from dead_link_hunter.aggregator import DeadLinkReport

NO_DEAD_LINKS = "No dead links found"


def build_table(report: DeadLinkReport) -> Table:
    table = Table("Page", "Counts", "Dead Links", show_lines=False)
    for page, count, dead_link in report.rows():
        table.add_row(page, str(count), dead_link)
    return table


def print_report(report: DeadLinkReport, console: Optional[Console] = None) -> None:
    """Print one row per dead link grouped by page, or a notice when there are none."""
    console = console or Console()
    console.print()
    if not report:
        console.print(NO_DEAD_LINKS)
        return
    console.print(build_table(report))
