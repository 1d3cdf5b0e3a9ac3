"""Exceptions raised by fakepeople."""
from __future__ import annotations

from pathlib import Path


class FakePeopleError(Exception):
    """Base class for all fakepeople errors."""


class InvalidArgumentError(FakePeopleError, ValueError):
    """Raised for empty reference tables, negative counts, mismatched columns
    and other arguments that can never produce a valid batch."""


class PartitionWriteError(FakePeopleError):
    """A single partition failed to build or write.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, index: int, path: Path, reason: str):
        super().__init__(f'partition {index} ({path}) failed: {reason}')
        self.index = index
        self.path = path
        self.reason = reason


class PartitionedWriteError(FakePeopleError):
    """One or more partitions failed; the rest ran to completion."""

    def __init__(self, failures: list[PartitionWriteError], completed: list):
        indexes = ', '.join(str(f.index) for f in failures)
        super().__init__(f'{len(failures)} partition(s) failed: {indexes}')
        self.failures = failures
        self.completed = completed


class OutputDirectoryError(FakePeopleError):
    """The output directory could not be created."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f'cannot create output directory {path}: {reason}')
        self.path = path
        self.reason = reason
