"""Unit tests for filesystem listing models."""

import pytest
from dux.fs.models import FsEntry, SizeResult, SizeStatus, WalkError


class TestFsEntryConstructors:
    """Tests for the FsEntry factory methods."""

    def test_file_is_resolved(self) -> None:
        """FsEntry.file creates a resolved, non-directory entry."""
        entry = FsEntry.file("/tmp/a", "f", 100)

        assert entry.is_directory is False
        assert entry.size_bytes == 100
        assert entry.status == SizeStatus.RESOLVED
        assert entry.is_resolved is True

    def test_directory_is_pending(self) -> None:
        """FsEntry.directory creates a pending entry without a size."""
        entry = FsEntry.directory("/tmp/a", "b")

        assert entry.is_directory is True
        assert entry.size_bytes is None
        assert entry.status == SizeStatus.PENDING
        assert entry.is_resolved is False

    def test_unreadable_file_keeps_error(self) -> None:
        """Unreadable files carry the error instead of a sentinel size."""
        entry = FsEntry.unreadable_file("/tmp/a", "locked", "Permission denied")

        assert entry.status == SizeStatus.UNREADABLE
        assert entry.size_bytes is None
        assert entry.error == "Permission denied"

    def test_empty_name_rejected(self) -> None:
        """An entry must have a name."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            FsEntry.directory("/tmp", "")

    def test_resolved_without_size_rejected(self) -> None:
        """A resolved entry must carry a size."""
        with pytest.raises(ValueError, match="must carry a size"):
            FsEntry(name="f", parent_path="/", is_directory=False, status=SizeStatus.RESOLVED)


class TestFsEntryPaths:
    """Tests for derived path properties."""

    def test_full_path_joins_parent_and_name(self) -> None:
        """full_path is parent_path joined with name."""
        assert FsEntry.directory("/tmp/a", "b").full_path == "/tmp/a/b"

    def test_full_path_under_root(self) -> None:
        """Joining with the root does not double the separator."""
        assert FsEntry.directory("/", "usr").full_path == "/usr"


class TestSortSize:
    """Tests for the sort_size property."""

    def test_known_size(self) -> None:
        """sort_size equals size_bytes when known."""
        assert FsEntry.file("/", "f", 42).sort_size == 42

    def test_unknown_size_ranks_lowest(self) -> None:
        """Unreadable and pending entries sort as -1."""
        assert FsEntry.unreadable_file("/", "f", "boom").sort_size == -1
        assert FsEntry.directory("/", "d").sort_size == -1


class TestWithSize:
    """Tests for publishing a directory size."""

    def test_with_size_resolves_copy(self) -> None:
        """with_size returns a resolved copy and leaves the original untouched."""
        pending = FsEntry.directory("/tmp/a", "b")

        resolved = pending.with_size(50)

        assert resolved.size_bytes == 50
        assert resolved.status == SizeStatus.RESOLVED
        assert pending.status == SizeStatus.PENDING
        assert resolved.full_path == pending.full_path

    def test_with_size_only_once(self) -> None:
        """A published directory size cannot be published again."""
        resolved = FsEntry.directory("/tmp/a", "b").with_size(50)

        with pytest.raises(ValueError, match="already published"):
            resolved.with_size(60)

    def test_with_size_rejects_files(self) -> None:
        """File sizes come from metadata and cannot be replaced."""
        with pytest.raises(ValueError):
            FsEntry.file("/tmp/a", "f", 1).with_size(2)

    def test_entries_are_immutable(self) -> None:
        """FsEntry is frozen."""
        entry = FsEntry.file("/tmp", "f", 1)
        with pytest.raises(AttributeError):
            entry.size_bytes = 2  # type: ignore[misc]


class TestSizeResult:
    """Tests for SizeResult defaults."""

    def test_errors_default_empty(self) -> None:
        """A SizeResult without warnings has an empty error tuple."""
        result = SizeResult(path="/tmp/a/b", size_bytes=50)
        assert result.errors == ()

    def test_carries_walk_errors(self) -> None:
        """Walk warnings travel with the result."""
        error = WalkError(path="/tmp/a/b/locked", message="Permission denied")
        result = SizeResult(path="/tmp/a/b", size_bytes=0, errors=(error,))
        assert result.errors[0].path == "/tmp/a/b/locked"
