"""CLI command for collecting lines from files in parallel."""

import sys

import click
from prometheus_client import REGISTRY, write_to_textfile

from linepool import collector as collector_module
from linepool.collector import LineCollector
from linepool.reader import FileSystemReader
from linepool.report import build_report, render_report
from linepool.utils import DEFAULT_FILES, get_default_workers, setup_logging


# Exit status for a run whose wait was interrupted (128 + SIGINT)
EXIT_INTERRUPTED = 130


def _enable_metrics():
    """Replace the no-op metrics used by the collector with real Prometheus metrics.

    Returns the module that was installed before, for _restore_metrics.
    """
    from linepool import prometheus as prom

    previous = collector_module.prom
    collector_module.prom = prom
    return previous


def _restore_metrics(previous):
    collector_module.prom = previous


@click.command('collect')
@click.argument('files', nargs=-1)
@click.option(
    '--workers',
    '-w',
    type=click.IntRange(min=1),
    default=None,
    help='Number of parallel workers (default: LINEPOOL_WORKERS or 5)',
)
@click.option(
    '--timeout',
    '-t',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Seconds to wait for all files before cancelling (default: LINEPOOL_TIMEOUT or 60)',
)
@click.option(
    '--head',
    type=click.IntRange(min=0),
    default=None,
    help='Number of collected lines to show (default: LINEPOOL_REPORT_HEAD or 5)',
)
@click.option(
    '--base-dir',
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help='Directory relative file names are resolved against (default: cwd)',
)
@click.option('--encoding', default=None, help='File encoding (default: LINEPOOL_ENCODING or utf-8)')
@click.option('--json', 'json_output', is_flag=True, help='Output the report as JSON')
@click.option(
    '--metrics-file',
    type=click.Path(dir_okay=False),
    default=None,
    help='Write Prometheus metrics in text format to this file after the run',
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def collect_command(
    files: tuple[str, ...],
    workers: int | None,
    timeout: float | None,
    head: int | None,
    base_dir: str | None,
    encoding: str | None,
    json_output: bool,
    metrics_file: str | None,
    verbose: bool,
):
    """Read files in parallel, uppercase every line and print a report.

    Missing or unreadable files are reported per file and never stop the run.
    Without FILES, data1.txt ... data10.txt are read.

    \b
    Examples:
        linepool a.txt b.txt c.txt
        linepool collect logs/*.log --workers 8
        linepool a.txt --timeout 5 --head 10
        linepool a.txt b.txt --json
    """
    setup_logging(verbose)

    file_ids = list(files) if files else list(DEFAULT_FILES)
    if workers is None:
        workers = get_default_workers()

    reader = FileSystemReader(base_dir=base_dir, encoding=encoding)
    collector = LineCollector(reader=reader, timeout=timeout)

    if metrics_file:
        previous_metrics = _enable_metrics()
        try:
            result = collector.process(file_ids, workers)
            write_to_textfile(metrics_file, REGISTRY)
        finally:
            _restore_metrics(previous_metrics)
    else:
        result = collector.process(file_ids, workers)

    report = build_report(result, head)

    if json_output:
        click.echo(report.model_dump_json(indent=2))
    else:
        for line in render_report(report):
            click.echo(line)

    if result.interrupted:
        sys.exit(EXIT_INTERRUPTED)
