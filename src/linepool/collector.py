"""Parallel line collector.

Reads a set of files with a bounded thread pool, uppercases every line and
records one status per file identifier.

Key behaviors:
- Each file is read by exactly one task; its lines are accumulated locally and
  merged into the run's collection after the join barrier, in input order.
- Missing files and read failures become per-file statuses, never exceptions.
  Lines read before a failure are kept.
- The barrier is bounded by a timeout. On timeout or interruption the pool is
  shut down, queued tasks are cancelled and running tasks stop at their next
  line. Files that did not finish in time are reported as cancelled.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from time import time
from typing import Iterable

from linepool.cli import prometheus as prom
from linepool.models import FileStatus
from linepool.reader import FileSystemReader, ResourceReader
from linepool.utils import get_default_timeout


logger = logging.getLogger(__name__)


def transform_line(line: str) -> str:
    """Strip the line terminator and uppercase the line."""
    return line.rstrip('\r\n').upper()


@dataclass
class FileOutcome:
    """What a single file task hands back to the orchestrator."""

    status: FileStatus
    lines: list[str] = field(default_factory=list)


@dataclass
class CollectionResult:
    """Statuses and lines of one collection run.

    Unpacks as ``(statuses, lines)``.
    """

    statuses: dict[str, FileStatus] = field(default_factory=dict)
    lines: list[str] = field(default_factory=list)
    worker_count: int = 1
    timed_out: bool = False
    interrupted: bool = False
    elapsed: float = 0.0

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter((self.statuses, self.lines))


def _unique(file_ids: Iterable[str]) -> list[str]:
    seen = set()
    unique_ids = []
    for file_id in file_ids:
        if file_id in seen:
            logger.warning(f'Duplicate file identifier ignored: {file_id}')
            continue
        seen.add(file_id)
        unique_ids.append(file_id)
    return unique_ids


class LineCollector:
    """Collects uppercased lines from many resources with a fixed-size worker pool.

    A collector holds no per-run state, so one instance can serve any number
    of sequential or concurrent ``process`` calls.
    """

    def __init__(
        self,
        reader: ResourceReader | None = None,
        timeout: float | None = None,
        encoding: str | None = None,
    ):
        """
        Args:
            reader: Resource reader, a FileSystemReader on the cwd when None
            timeout: Join barrier timeout in seconds, LINEPOOL_TIMEOUT when None
            encoding: Encoding for the default reader (ignored when reader is given)
        """
        self.reader = reader if reader is not None else FileSystemReader(encoding=encoding)
        self.timeout = timeout if timeout is not None else get_default_timeout()

    def process(self, file_ids: Iterable[str], worker_count: int) -> CollectionResult:
        """Process files in parallel and wait for the results.

        Args:
            file_ids: File identifiers, duplicates are processed once
            worker_count: Maximum number of files read at the same time

        Returns:
            CollectionResult with one status per distinct identifier

        Raises:
            ValueError: If worker_count is less than 1
        """
        if worker_count < 1:
            raise ValueError(f'worker_count must be at least 1, got {worker_count}')

        unique_ids = _unique(file_ids)
        result = CollectionResult(worker_count=worker_count)
        start_time = time()

        cancel_event = threading.Event()
        executor = ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix='linepool')
        id_to_future: dict[str, Future] = {}
        done: set[Future] = set()
        completed = False

        try:
            for file_id in unique_ids:
                id_to_future[file_id] = executor.submit(self._process_file, file_id, cancel_event)

            done, not_done = wait(id_to_future.values(), timeout=self.timeout)
            if not_done:
                result.timed_out = True
                logger.warning(
                    f'Timed out after {self.timeout}s with {len(not_done)} of {len(id_to_future)} files '
                    f'unfinished, cancelling remaining tasks'
                )
            else:
                completed = True
        except KeyboardInterrupt:
            result.interrupted = True
            done = {future for future in id_to_future.values() if future.done()}
            logger.warning(
                f'Interrupted while waiting, cancelling remaining tasks ({len(done)} of {len(unique_ids)} finished)'
            )
        finally:
            if completed:
                executor.shutdown(wait=True)
            else:
                cancel_event.set()
                executor.shutdown(wait=False, cancel_futures=True)

        # Past the barrier: only futures observed as done are read
        reason = 'interrupted' if result.interrupted else f'timed out after {self.timeout}s'
        for file_id in unique_ids:
            future = id_to_future.get(file_id)
            if future is None or future not in done or future.cancelled():
                outcome = FileOutcome(FileStatus.cancelled(reason))
            else:
                outcome = self._outcome_of(file_id, future)

            result.statuses[file_id] = outcome.status
            result.lines.extend(outcome.lines)
            prom.record_file_status(outcome.status.kind.value, outcome.status.line_count)

        result.elapsed = time() - start_time
        prom.record_collection(
            duration=result.elapsed,
            num_files=len(unique_ids),
            num_workers=worker_count,
            timed_out=result.timed_out,
            interrupted=result.interrupted,
        )
        logger.info(
            f'Collected {result.total_lines} lines from {len(unique_ids)} files '
            f'with {worker_count} workers in {result.elapsed:.3f}s'
        )
        return result

    def _outcome_of(self, file_id: str, future: Future) -> FileOutcome:
        try:
            return future.result()
        except Exception as e:
            logger.error(f'Task for {file_id} failed unexpectedly: {e}', exc_info=e)
            prom.record_task_crash()
            return FileOutcome(FileStatus.read_error(str(e) or type(e).__name__))

    def _process_file(self, file_id: str, cancel_event: threading.Event) -> FileOutcome:
        """Read one file into a local list. Runs on a pool thread."""
        if cancel_event.is_set():
            return FileOutcome(FileStatus.cancelled('cancelled before start'))

        logger.debug(f'Processing {file_id}')
        if not self.reader.exists(file_id):
            logger.warning(f'File not found: {file_id} (check the working directory)')
            return FileOutcome(FileStatus.not_found())

        lines: list[str] = []
        try:
            with self.reader.open(file_id) as stream:
                for raw_line in stream:
                    if cancel_event.is_set():
                        logger.debug(f'Stopping {file_id} after {len(lines)} lines: cancelled')
                        return FileOutcome(FileStatus.cancelled('cancelled while reading'), lines)
                    lines.append(transform_line(raw_line))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f'Error reading {file_id}: {e}')
            return FileOutcome(FileStatus.read_error(str(e), len(lines)), lines)

        logger.debug(f'Finished {file_id}: {len(lines)} lines')
        return FileOutcome(FileStatus.success(len(lines)), lines)


def process(
    file_ids: Iterable[str],
    worker_count: int,
    reader: ResourceReader | None = None,
    timeout: float | None = None,
) -> CollectionResult:
    """Convenience wrapper: ``LineCollector(reader, timeout).process(file_ids, worker_count)``."""
    return LineCollector(reader=reader, timeout=timeout).process(file_ids, worker_count)
