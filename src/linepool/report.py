"""Report building and rendering for collection runs"""

from linepool.collector import CollectionResult
from linepool.models import CollectionReport
from linepool.utils import get_default_report_head


REPORT_HEADER = '===== Processing Report ====='


def build_report(result: CollectionResult, head: int | None = None) -> CollectionReport:
    """
    Build a report from a finished collection run.

    Args:
        result: Result returned by LineCollector.process
        head: Number of leading lines to include, LINEPOOL_REPORT_HEAD when None

    Returns:
        CollectionReport with statuses in input order
    """
    if head is None:
        head = get_default_report_head()
    if head < 0:
        raise ValueError(f'head must not be negative, got {head}')

    return CollectionReport(
        total_lines=result.total_lines,
        files=dict(result.statuses),
        first_lines=result.lines[:head],
        head=head,
        workers=result.worker_count,
        timed_out=result.timed_out,
        interrupted=result.interrupted,
        time=result.elapsed,
    )


def render_report(report: CollectionReport) -> list[str]:
    """Render a report as text lines for console output."""
    output = [REPORT_HEADER]
    for file_id, status in report.files.items():
        output.append(f'{file_id}: {status.describe()}')

    output.append(f'Total lines processed: {report.total_lines}')

    failed = report.failed_files
    if failed:
        output.append(f'Files with problems: {len(failed)} of {len(report.files)}')

    if report.timed_out:
        output.append('Warning: timed out waiting for files, report is partial')
    elif report.interrupted:
        output.append('Warning: interrupted while waiting for files, report is partial')

    if report.head:
        output.append('First lines processed:')
        output.extend(report.first_lines)
    return output
