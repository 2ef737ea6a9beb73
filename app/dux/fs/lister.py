"""Directory lister.

Reads the immediate children of one directory and classifies each as a
file or a directory. File sizes come straight from the entry metadata;
directory sizes are left pending for the size aggregator.
"""

import logging
import os

from dux.fs.models import FsEntry

logger = logging.getLogger(__name__)


class DirectoryUnreadableError(Exception):
    """Raised when a directory itself cannot be opened or read.

    Attributes:
        path: Directory that failed.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryLister:
    """Lists the immediate children of a directory.

    Symbolic links are classified by the link itself (``lstat``), so a
    link to a directory is listed as a file with the link's own size.
    """

    def list_directory(self, path: str) -> list[FsEntry]:
        """List the immediate children of ``path``.

        Args:
            path: Directory to read.

        Returns:
            One FsEntry per child. Files are resolved (or marked
            unreadable); directories are pending.

        Raises:
            DirectoryUnreadableError: If the directory cannot be read
                (permission denied, not a directory, deleted, ...).
        """
        try:
            with os.scandir(path) as it:
                dir_entries = list(it)
        except OSError as exc:
            raise DirectoryUnreadableError(path, exc.strerror or str(exc)) from exc

        results: list[FsEntry] = []
        for dir_entry in dir_entries:
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if is_dir:
                results.append(FsEntry.directory(path, dir_entry.name))
                continue

            try:
                size = dir_entry.stat(follow_symlinks=False).st_size
            except OSError as exc:
                logger.warning("Cannot read metadata of %s: %s", dir_entry.path, exc)
                results.append(
                    FsEntry.unreadable_file(path, dir_entry.name, exc.strerror or str(exc))
                )
                continue
            results.append(FsEntry.file(path, dir_entry.name, size))

        return results
