"""Filesystem domain models for directory listings.

This module defines the value types shared by the lister, the size
aggregator and the presentation layer: one entry per immediate child of
a displayed directory, the per-subtree size results produced by the
aggregator, and the warnings collected while walking a subtree.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum


class SizeStatus(str, Enum):
    """Resolution state of an entry's size.

    Attributes:
        PENDING: Directory whose total size has not been computed yet.
        RESOLVED: Size is known (file metadata or aggregated subtree total).
        UNREADABLE: File metadata could not be read.
    """

    PENDING = "pending"
    RESOLVED = "resolved"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class WalkError:
    """A path that could not be read during a subtree walk.

    Attributes:
        path: Path that failed.
        message: Human-readable reason (usually the OSError text).
    """

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class SizeResult:
    """Outcome of one subdirectory size computation.

    Attributes:
        path: Full path of the subdirectory that was walked.
        size_bytes: Sum of all regular-file sizes below ``path``.
        errors: Warnings raised while walking the subtree.
    """

    path: str
    size_bytes: int
    errors: tuple[WalkError, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class FsEntry:
    """One immediate child of a displayed directory.

    Entries are immutable. Directory entries start out ``PENDING`` and
    are replaced exactly once by the size aggregator with a resolved
    copy (see :meth:`with_size`).

    Attributes:
        name: Base name of the entry.
        parent_path: Absolute path of the containing directory.
        is_directory: Whether the entry is a directory (fixed at creation).
        size_bytes: Size in bytes, None while pending or when unreadable.
        status: Resolution state of ``size_bytes``.
        error: Reason the metadata could not be read, if any.
    """

    name: str
    parent_path: str
    is_directory: bool
    size_bytes: int | None = None
    status: SizeStatus = SizeStatus.PENDING
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if self.status == SizeStatus.RESOLVED and self.size_bytes is None:
            msg = f"Resolved entry {self.name!r} must carry a size"
            raise ValueError(msg)

    @classmethod
    def file(cls, parent_path: str, name: str, size_bytes: int) -> "FsEntry":
        """Create a file entry whose size was read from its metadata."""
        return cls(
            name=name,
            parent_path=parent_path,
            is_directory=False,
            size_bytes=size_bytes,
            status=SizeStatus.RESOLVED,
        )

    @classmethod
    def unreadable_file(cls, parent_path: str, name: str, error: str) -> "FsEntry":
        """Create a file entry whose metadata could not be read."""
        return cls(
            name=name,
            parent_path=parent_path,
            is_directory=False,
            status=SizeStatus.UNREADABLE,
            error=error,
        )

    @classmethod
    def directory(cls, parent_path: str, name: str) -> "FsEntry":
        """Create a directory entry with a pending size."""
        return cls(name=name, parent_path=parent_path, is_directory=True)

    @property
    def full_path(self) -> str:
        """Absolute path of the entry."""
        return os.path.join(self.parent_path, self.name)

    @property
    def is_resolved(self) -> bool:
        """Check if the size is known."""
        return self.status == SizeStatus.RESOLVED

    @property
    def sort_size(self) -> int:
        """Size used for ordering; unknown sizes rank below every real size."""
        if self.size_bytes is None:
            return -1
        return self.size_bytes

    def with_size(self, size_bytes: int) -> "FsEntry":
        """Return a resolved copy of a pending directory entry.

        Args:
            size_bytes: Aggregated subtree size.

        Returns:
            New FsEntry with ``status`` RESOLVED.

        Raises:
            ValueError: If the entry is not a pending directory.
        """
        if not self.is_directory or self.status != SizeStatus.PENDING:
            msg = f"Size of {self.full_path!r} is already published"
            raise ValueError(msg)
        return replace(self, size_bytes=size_bytes, status=SizeStatus.RESOLVED)
