"""Tests for resource readers"""

import os
from pathlib import Path

import pytest

from linepool.reader import FileSystemReader, ResourceReader


class TestFileSystemReader:
    """Tests for FileSystemReader."""

    def test_is_resource_reader(self):
        assert isinstance(FileSystemReader(), ResourceReader)

    def test_resolve_relative_to_base_dir(self, temp_dir):
        reader = FileSystemReader(base_dir=temp_dir)
        assert reader.resolve('data1.txt') == Path(temp_dir) / 'data1.txt'

    def test_resolve_absolute_unchanged(self, temp_dir):
        reader = FileSystemReader(base_dir='/somewhere/else')
        path = os.path.join(temp_dir, 'x.txt')
        assert reader.resolve(path) == Path(path)

    def test_resolve_without_base_dir(self):
        assert FileSystemReader().resolve('x.txt') == Path('x.txt')

    def test_exists(self, temp_dir, write_file):
        write_file('here.txt', ['x'])
        reader = FileSystemReader(base_dir=temp_dir)

        assert reader.exists('here.txt')
        assert not reader.exists('gone.txt')

    def test_open_yields_lines_and_closes(self, temp_dir, write_file):
        write_file('lines.txt', ['first', 'second'])
        reader = FileSystemReader(base_dir=temp_dir)

        with reader.open('lines.txt') as stream:
            lines = list(stream)

        assert lines == ['first\n', 'second\n']
        assert stream.closed

    def test_open_missing_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            FileSystemReader(base_dir=temp_dir).open('gone.txt')

    def test_encoding(self, temp_dir):
        with open(os.path.join(temp_dir, 'latin.txt'), 'wb') as f:
            f.write('café\n'.encode('latin-1'))

        with FileSystemReader(base_dir=temp_dir, encoding='latin-1').open('latin.txt') as stream:
            assert stream.read() == 'café\n'

    def test_default_encoding(self):
        assert FileSystemReader().encoding == 'utf-8'

    def test_encoding_from_environment(self, monkeypatch):
        monkeypatch.setenv('LINEPOOL_ENCODING', 'latin-1')
        assert FileSystemReader().encoding == 'latin-1'
