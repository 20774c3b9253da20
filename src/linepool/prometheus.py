"""Prometheus metrics for linepool"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================================
# File Processing Metrics
# ============================================================================

# Files processed by terminal status
files_total = Counter(
    'linepool_files_total',
    'Total number of file tasks by terminal status',
    ['status'],  # success, not_found, read_error, cancelled
)

# Lines appended to collections (partial reads included)
lines_collected_total = Counter('linepool_lines_collected_total', 'Total number of lines collected across all runs')

lines_per_file = Histogram(
    'linepool_lines_per_file',
    'Number of lines contributed by a single file',
    buckets=[0, 1, 10, 100, 1000, 10_000, 100_000, 1_000_000, 10_000_000],
)


# ============================================================================
# Run Metrics
# ============================================================================

collection_runs_total = Counter('linepool_collection_runs_total', 'Total number of collection runs')

collection_duration_seconds = Histogram(
    'linepool_collection_duration_seconds',
    'Time from pool creation to the end of the join barrier',
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0, 300.0],
    # 10ms to 5 minutes - the default barrier timeout is 60s
)

files_per_run = Histogram(
    'linepool_files_per_run', 'Number of file identifiers in a single run', buckets=[1, 2, 5, 10, 20, 50, 100, 500]
)

# Pool size of the most recent run
workers = Gauge('linepool_workers', 'Worker pool size of the most recent run')


# ============================================================================
# Barrier Metrics
# ============================================================================

pool_timeouts_total = Counter('linepool_pool_timeouts_total', 'Runs whose join barrier timed out')

interrupted_total = Counter('linepool_interrupted_total', 'Runs whose wait was interrupted')

task_crashes_total = Counter('linepool_task_crashes_total', 'File tasks that raised an unexpected exception')


# ============================================================================
# Helper Functions
# ============================================================================


def record_file_status(status: str, line_count: int):
    """
    Record the terminal status of a file task.

    Args:
        status: Status kind value (success, not_found, read_error, cancelled)
        line_count: Lines the file contributed to the collection
    """
    files_total.labels(status=status).inc()
    lines_per_file.observe(line_count)
    lines_collected_total.inc(line_count)


def record_collection(
    duration: float,
    num_files: int,
    num_workers: int,
    timed_out: bool = False,
    interrupted: bool = False,
):
    """
    Record metrics for a whole collection run.

    Args:
        duration: Run duration in seconds
        num_files: Number of distinct file identifiers
        num_workers: Worker pool size
        timed_out: Whether the join barrier timed out
        interrupted: Whether the wait was interrupted
    """
    collection_runs_total.inc()
    collection_duration_seconds.observe(duration)
    files_per_run.observe(num_files)
    workers.set(num_workers)

    if timed_out:
        pool_timeouts_total.inc()

    if interrupted:
        interrupted_total.inc()


def record_task_crash():
    task_crashes_total.inc()
