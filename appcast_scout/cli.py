# === FILE: appcast_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for AppcastScout.

Commands:
  scan      Scan binary files and print or save the appcast URLs found
  bundle    Scan a macOS .app bundle and print its likely update feeds
  config    Show the effective configuration

Exit codes: 0 on success, also when no URL is found; 1 if a file cannot be
read, a report cannot be saved or the configuration is invalid.

Common options:
  --config PATH       YAML/JSON config (built-in defaults if omitted)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (console only if omitted)
  --log-format FORMAT Logging format string

scan options:
  --json PATH         Save a JSON report
  --html PATH         Save an HTML report
  --template DIR      Directory with Jinja2 templates
  --pretty            Indent the JSON report

Also:
  --version, -v       Show the AppcastScout version

Example:
  appcast-scout scan /Applications/Foo.app/Contents/MacOS/Foo
  appcast-scout bundle /Applications/Foo.app
"""
import sys
from pathlib import Path

import click

from appcast_scout import __version__
from appcast_scout.aggregator import aggregate_results
from appcast_scout.config import load_config
from appcast_scout.detector import AppcastDetector
from appcast_scout.engine import extract_appcast_urls
from appcast_scout.errors import ExtractionError
from appcast_scout.logger import DEFAULT_FORMAT, init_logging
from appcast_scout.report.html_report import render_html
from appcast_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='AppcastScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (console only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """AppcastScout: find update feed URLs inside binaries."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.argument('files', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with Jinja2 templates (packaged template if omitted)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent the JSON report (2 spaces)'
)
@click.pass_context
def scan(ctx, files, json_output, html_output, template_dir, pretty):
    """Scan FILES for appcast URLs."""
    cfg = ctx.obj['config']
    results = []
    for path in files:
        try:
            results.append((path, extract_appcast_urls(path, cfg.extractor)))
        except ExtractionError as e:
            click.secho(f'Cannot scan {path}: {e}', fg='red', err=True)
            results.append((path, e))

    report = aggregate_results(results)

    # no report files requested: URLs go to stdout
    if not json_output and not html_output:
        for path, outcome in results:
            if isinstance(outcome, ExtractionError):
                continue
            if len(files) > 1:
                click.echo(f'==> {path} <==')
            click.echo(outcome.buffer.decode('ascii'), nl=False)
    else:
        if json_output:
            try:
                saved_json = render_json(report, json_output, pretty=pretty)
                click.echo(f'JSON report: {saved_json}')
            except Exception as e:
                print_error(f'Failed to save JSON report: {e}')

        if html_output:
            try:
                saved_html = render_html(report, template_dir, html_output)
                click.echo(f'HTML report: {saved_html}')
            except Exception as e:
                print_error(f'Failed to save HTML report: {e}')

    if report.failed:
        sys.exit(1)


@cli.command('bundle', context_settings=CONTEXT_SETTINGS)
@click.argument('app_path', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    '--executable', '-e', 'executable',
    default=None,
    help='Main executable name (read from Info.plist if omitted)'
)
@click.pass_context
def bundle(ctx, app_path, executable):
    """Find the update feed of the app bundle at APP_PATH."""
    detector = AppcastDetector(ctx.obj['config'])
    try:
        urls = detector.detect(app_path, executable)
    except OSError as e:
        print_error(f'Failed to scan bundle: {e}')
    if not urls:
        click.secho(f'No appcast URLs found in {app_path}', fg='yellow', err=True)
    for url in urls:
        click.echo(url)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
