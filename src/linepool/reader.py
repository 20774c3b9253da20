"""Resource readers used by the line collector.

A reader answers two questions for a file identifier: does the resource
exist, and give me a line stream for it. Streams are text file objects:
iterating yields lines (terminators included) and closing them releases the
underlying resource, so callers use them in a ``with`` block.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from linepool.utils import get_default_encoding


logger = logging.getLogger(__name__)


class ResourceReader(ABC):
    """Line-oriented access to resources identified by strings."""

    @abstractmethod
    def exists(self, file_id: str) -> bool:
        """Return True if the resource is present at call time."""

    @abstractmethod
    def open(self, file_id: str) -> TextIO:
        """
        Open the resource for reading.

        Raises:
            OSError: If the resource cannot be opened
        """


class FileSystemReader(ResourceReader):
    """Reads plain text files relative to a base directory."""

    def __init__(self, base_dir: str | os.PathLike | None = None, encoding: str | None = None):
        """
        Args:
            base_dir: Directory relative identifiers are resolved against (cwd when None)
            encoding: Text encoding, LINEPOOL_ENCODING or utf-8 when None
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding or get_default_encoding()

    def resolve(self, file_id: str) -> Path:
        path = Path(file_id)
        if path.is_absolute() or self.base_dir is None:
            return path
        return self.base_dir / path

    def exists(self, file_id: str) -> bool:
        return self.resolve(file_id).exists()

    def open(self, file_id: str) -> TextIO:
        path = self.resolve(file_id)
        logger.debug(f'Opening {path} ({self.encoding})')
        return open(path, 'r', encoding=self.encoding)

    def __repr__(self):
        return f'FileSystemReader(base_dir={self.base_dir!r}, encoding={self.encoding!r})'
