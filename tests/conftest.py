"""Pytest configuration and shared fixtures for linepool tests.

This module provides:
- an auto-use fixture that isolates tests from LINEPOOL_* environment variables
- an in-memory resource reader with fault injection and slow streams
"""

import os
import shutil
import tempfile
import threading

import pytest

from linepool.reader import ResourceReader


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Auto-use fixture that removes LINEPOOL_* variables for each test.

    Tests that need a variable set it explicitly with monkeypatch.setenv.
    """
    for key in list(os.environ):
        if key.startswith('LINEPOOL_'):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def temp_dir():
    """Temporary directory removed after the test."""
    tmp_dir = tempfile.mkdtemp(prefix='linepool_test_')
    yield tmp_dir
    shutil.rmtree(tmp_dir, ignore_errors=True)


@pytest.fixture
def write_file(temp_dir):
    """Factory writing a text file with the given lines into temp_dir."""

    def _write(name: str, lines: list[str]) -> str:
        path = os.path.join(temp_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            for line in lines:
                f.write(line + '\n')
        return path

    return _write


class MemoryStream:
    """Line stream over a list of strings.

    Args:
        lines: Lines to yield (terminators are added)
        fail_after: Raise OSError when this many lines have been yielded
        gate: Event every line waits on before being yielded
    """

    def __init__(self, lines, fail_after=None, gate=None):
        self._lines = list(lines)
        self.fail_after = fail_after
        self.gate = gate
        self.closed = False
        self.closed_event = threading.Event()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __iter__(self):
        for index, line in enumerate(self._lines):
            if self.fail_after is not None and index == self.fail_after:
                raise OSError(f'simulated read failure at line {index + 1}')
            if self.gate is not None:
                self.gate.wait(5)
            yield line + '\n'

    def close(self):
        self.closed = True
        self.closed_event.set()


class MemoryReader(ResourceReader):
    """In-memory reader recording every stream it opens."""

    def __init__(self, files, fail_after=None, gates=None, open_errors=None):
        self.files = dict(files)
        self.fail_after = fail_after or {}
        self.gates = gates or {}
        self.open_errors = open_errors or {}
        self.streams: dict[str, MemoryStream] = {}
        self._lock = threading.Lock()

    def exists(self, file_id):
        return file_id in self.files

    def open(self, file_id):
        if file_id in self.open_errors:
            raise self.open_errors[file_id]
        stream = MemoryStream(
            self.files[file_id],
            fail_after=self.fail_after.get(file_id),
            gate=self.gates.get(file_id),
        )
        with self._lock:
            self.streams[file_id] = stream
        return stream


@pytest.fixture
def memory_reader():
    """Factory for MemoryReader instances."""
    return MemoryReader
