# === FILE: js_packer/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of JsPacker.

Commands:
  pack      Deduplicate and bundle the scripts of a built site
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: ./js_packer.yaml when present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

pack options:
  --source DIR        Content root for local scripts (overrides source)
  --out DIR           Write the result here instead of in place
  --inline/--external Inline bundles into pages or write shared files
  --no-uglify         Disable minification
  --report PATH       Save a JSON report of the bundles
  --pretty            Indent the JSON report

Also:
  --version, -v       Show the JsPacker version

Example:
  js-packer --config js_packer.yaml pack build --source src --report pack.json
"""
import sys
from pathlib import Path

import click

from js_packer import __version__
from js_packer.config import load_config
from js_packer.engine import Engine
from js_packer.logger import DEFAULT_FORMAT, DEFAULT_LEVEL, configure
from js_packer.report.json_report import render_json
from js_packer.site_files import changed_paths, load_site, write_site

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='JsPacker, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level [default: JS_PACKER_LOG_LEVEL or INFO]'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """JsPacker command group."""
    configure(level=log_level or DEFAULT_LEVEL, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('pack', context_settings=CONTEXT_SETTINGS)
@click.argument(
    'build_dir',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    '--source', '-s', 'source_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Content root for local scripts'
)
@click.option(
    '--out', '-o', 'out_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Output directory (in place when omitted)'
)
@click.option(
    '--inline/--external', 'inline',
    default=None,
    help='Inline bundles into pages or write shared bundle files'
)
@click.option('--no-uglify', 'no_uglify', is_flag=True, help='Disable minification')
@click.option(
    '--report', '-r', 'report_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option('--pretty', is_flag=True, help='Indent the JSON report (2 spaces)')
@click.pass_context
def pack(ctx, build_dir, source_dir, out_dir, inline, no_uglify, report_path, pretty):
    """Bundle the scripts of the site built in BUILD_DIR."""
    cfg = ctx.obj['config']
    updates = {}
    if inline is not None:
        updates['inline'] = inline
    if no_uglify:
        updates['uglify'] = False
    if updates:
        cfg = cfg.model_copy(update=updates)

    try:
        files = load_site(build_dir)
    except OSError as e:
        print_error(f'Failed to read {build_dir}: {e}')
    original = dict(files)

    result = Engine(cfg, source_dir=source_dir).pack(files)

    if report_path:
        try:
            click.echo(f'JSON report: {render_json(result, cfg, report_path, pretty=pretty)}')
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')

    if not result.ok:
        print_error(f'Packing failed: {result.error}')

    target = out_dir or build_dir
    in_place = out_dir is None or out_dir.resolve() == build_dir.resolve()
    try:
        written = write_site(target, files, only=changed_paths(original, files) if in_place else None)
    except OSError as e:
        print_error(f'Failed to write {target}: {e}')

    click.echo(
        f'{len(result.bundles)} bundle(s), {len(result.artifacts)} file(s) created, '
        f'{written} file(s) written to {target}'
    )


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2, by_alias=True))


if __name__ == "__main__":
    cli()
