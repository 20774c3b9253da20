"""linepool - collect uppercased lines from many files with a bounded worker pool"""

from linepool.__version__ import __version__
from linepool.collector import CollectionResult, LineCollector, process, transform_line
from linepool.models import CollectionReport, FileStatus, StatusKind
from linepool.reader import FileSystemReader, ResourceReader


__all__ = [
    '__version__',
    'CollectionReport',
    'CollectionResult',
    'FileStatus',
    'FileSystemReader',
    'LineCollector',
    'ResourceReader',
    'StatusKind',
    'process',
    'transform_line',
]
