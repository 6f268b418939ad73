"""dead_link_hunter.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from dead_link_hunter.aggregator import DeadLinkReport
from dead_link_hunter.report.paths import with_default_suffix

#: templates shipped with the package
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def render_html(
    report: DeadLinkReport,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Render the HTML report from a template and save it.

    Args:
        report: result of a hunt.
        output_path: destination HTML file (``.html`` added when it has no suffix).
        template_dir: directory holding ``report.html.j2``; the bundled
            template is used when omitted.

    Returns:
        Path of the saved HTML file.

    Example:
    ```python
    from dead_link_hunter.report.html_report import render_html
    html_path = render_html(report, 'reports/report.html')
    ```
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output = with_default_suffix(output_path, ".html")
    output.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {
        "pages": report.records(),
        "total": report.total,
    }

    output.write_text(template.render(**context), encoding="utf-8")
    return output
