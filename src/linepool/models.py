"""Pydantic models for collection statuses and reports"""

from enum import Enum

from pydantic import BaseModel, Field


class StatusKind(str, Enum):
    """Terminal outcome of a single file task."""

    SUCCESS = 'success'
    NOT_FOUND = 'not_found'
    READ_ERROR = 'read_error'
    CANCELLED = 'cancelled'


class FileStatus(BaseModel):
    """Outcome of processing one file identifier

    Attributes:
        kind: Terminal state reached by the file task
        line_count: Lines this file contributed to the collection.
                    For read_error this is the number of lines read before the failure.
        message: Error text for read_error, reason for cancelled
    """

    kind: StatusKind = Field(..., examples=['success'], description="Terminal state of the file task")
    line_count: int = Field(0, ge=0, examples=[42], description="Lines contributed to the collection")
    message: str | None = Field(None, examples=['Permission denied'], description="Error or cancellation reason")

    @classmethod
    def success(cls, line_count: int) -> 'FileStatus':
        return cls(kind=StatusKind.SUCCESS, line_count=line_count)

    @classmethod
    def not_found(cls) -> 'FileStatus':
        return cls(kind=StatusKind.NOT_FOUND)

    @classmethod
    def read_error(cls, message: str, line_count: int = 0) -> 'FileStatus':
        return cls(kind=StatusKind.READ_ERROR, line_count=line_count, message=message)

    @classmethod
    def cancelled(cls, reason: str | None = None) -> 'FileStatus':
        return cls(kind=StatusKind.CANCELLED, message=reason)

    @property
    def ok(self) -> bool:
        return self.kind == StatusKind.SUCCESS

    def describe(self) -> str:
        """Human-readable status string used in reports."""
        if self.kind == StatusKind.SUCCESS:
            noun = 'line' if self.line_count == 1 else 'lines'
            return f'Success ({self.line_count} {noun})'
        if self.kind == StatusKind.NOT_FOUND:
            return 'Not found'
        if self.kind == StatusKind.READ_ERROR:
            return f'Read error: {self.message}'
        if self.message:
            return f'Cancelled: {self.message}'
        return 'Cancelled'


class CollectionReport(BaseModel):
    """Summary of a collection run

    Attributes:
        total_lines: Number of lines in the collection (all files, partial reads included)
        files: Mapping of file identifiers to their status, in input order
        first_lines: First `head` lines of the collection
        head: Number of lines requested for first_lines
        workers: Size of the worker pool
        timed_out: Whether the join barrier hit its timeout
        interrupted: Whether the wait was interrupted externally
        time: Run duration in seconds
    """

    total_lines: int = Field(..., ge=0, examples=[3])
    files: dict[str, FileStatus] = Field(
        default_factory=dict,
        examples=[{'data1.txt': {'kind': 'success', 'line_count': 3, 'message': None}}],
    )
    first_lines: list[str] = Field(default_factory=list, examples=[['FIRST LINE', 'SECOND LINE']])
    head: int = Field(5, ge=0)
    workers: int = Field(..., ge=1, examples=[5])
    timed_out: bool = False
    interrupted: bool = False
    time: float = Field(0.0, examples=[0.012], description="Run duration in seconds")

    @property
    def failed_files(self) -> list[str]:
        return [file_id for file_id, status in self.files.items() if not status.ok]
