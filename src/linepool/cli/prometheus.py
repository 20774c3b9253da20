"""No-op Prometheus stub for CLI usage (when --metrics-file is not used)"""


class NoOpMetric:
    """No-op metric that accepts any method call and does nothing."""

    def __call__(self, *args, **kwargs):
        return self

    def __getattr__(self, name):
        return self

    def inc(self, *args, **kwargs):
        pass

    def observe(self, *args, **kwargs):
        pass

    def labels(self, *args, **kwargs):
        return self

    def set(self, *args, **kwargs):
        pass


# Create no-op instances for all metrics
files_total = NoOpMetric()
lines_collected_total = NoOpMetric()
lines_per_file = NoOpMetric()

collection_runs_total = NoOpMetric()
collection_duration_seconds = NoOpMetric()
files_per_run = NoOpMetric()
workers = NoOpMetric()

pool_timeouts_total = NoOpMetric()
interrupted_total = NoOpMetric()
task_crashes_total = NoOpMetric()


def record_file_status(status: str, line_count: int):
    pass


def record_collection(
    duration: float,
    num_files: int,
    num_workers: int,
    timed_out: bool = False,
    interrupted: bool = False,
):
    pass


def record_task_crash():
    pass
