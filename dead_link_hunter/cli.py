# === FILE: dead_link_hunter/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for Dead Link Hunter.

Commands:
  hunt      Crawl a site and print or export its dead links
  config    Show the resolved configuration

Global options:
  --config PATH       YAML/JSON config file (optional; flags override it)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format string

hunt options:
  --static / --dynamic   Plain HTTP engine or headless browser (default: dynamic)
  --max-depth N          Link depth limit (static engine)
  --max-concurrency N    Fetches in flight at once
  --timeout SEC          Timeout for one fetch
  --export FORMAT        csv, json or html instead of the console table
  --filename NAME        Export file name (default: result)

Extra:
  --version, -v       Show the version

Example:
  dead-link-hunter hunt https://example.com --static --export csv --filename broken
"""
import asyncio
import sys
import time
from pathlib import Path

import click
from pydantic import ValidationError

from dead_link_hunter import __version__
from dead_link_hunter.config import load_config
from dead_link_hunter.hunter import start_hunt
from dead_link_hunter.logger import init_logging
from dead_link_hunter.report.console import print_report
from dead_link_hunter.report.csv_report import render_csv
from dead_link_hunter.report.html_report import render_html
from dead_link_hunter.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

EXPORTERS = {
    "csv": render_csv,
    "json": render_json,
    "html": render_html,
}


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _resolve_config(ctx, **overrides):
    """Load the config file from the group options, apply flag overrides, exit on error."""
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Error loading configuration: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='DeadLinkHunter, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Find links that answer with HTTP status > 299 on a website."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('hunt', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option(
    '--static/--dynamic', 'static',
    default=None,
    help='Plain HTTP engine or headless browser engine.'
)
@click.option('--max-depth', 'max_depth', type=click.IntRange(min=0), default=None,
              help='Link depth limit (static engine only).')
@click.option('--max-concurrency', 'max_concurrency', type=click.IntRange(min=1), default=None,
              help='Maximum number of fetches in flight.')
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Timeout for one fetch (seconds).')
@click.option(
    '--export', '-e', 'export_format',
    default=None,
    type=click.Choice(sorted(EXPORTERS), case_sensitive=False),
    help='Export the result instead of printing it.'
)
@click.option(
    '--filename', '-f', 'filename',
    default='result', show_default=True,
    help='Export file name; the format extension is added when missing.'
)
@click.pass_context
def hunt(ctx, url, static, max_depth, max_concurrency, timeout, export_format, filename):
    """Crawl URL and report every dead link, grouped by the page linking to it."""
    engine = None if static is None else ('static' if static else 'dynamic')
    cfg = _resolve_config(
        ctx,
        seed_url=url,
        engine=engine,
        max_depth=max_depth,
        max_concurrency=max_concurrency,
        timeout=timeout,
    )
    click.echo(f'Hunting dead links from: {cfg.seed_url}')

    start = time.monotonic()
    try:
        report = asyncio.run(start_hunt(cfg))
    except Exception as e:
        print_error(f'Error while hunting: {e}')
    elapsed = time.monotonic() - start

    if export_format is None:
        print_report(report)
    else:
        exporter = EXPORTERS[export_format.lower()]
        try:
            saved = exporter(report, filename)
        except Exception as e:
            print_error(f'Error exporting {export_format} report: {e}')
        click.echo(f'{export_format.upper()} report: {saved}')

    click.echo(f'Total hunting time: {elapsed:.2f}s')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.pass_context
def show_config(ctx, url):
    """Show the resolved configuration as JSON."""
    cfg = _resolve_config(ctx, seed_url=url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
