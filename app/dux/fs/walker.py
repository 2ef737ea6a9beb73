"""Recursive subtree walker for size aggregation.

Visits every descendant of a path without following symbolic links and
reports the size of each regular file. Read errors on individual paths
are collected as warnings and never abort the rest of the walk.
"""

import logging
import os
import stat
from collections.abc import Iterator

from dux.fs.models import WalkError

logger = logging.getLogger(__name__)


class TreeWalker:
    """Walks a directory tree and reports regular-file sizes.

    The walk is iterative (no recursion limit) and uses ``os.scandir``
    with ``lstat`` semantics: symbolic links are never followed, so a
    link to a directory is neither descended nor counted.

    Example:
        >>> walker = TreeWalker()
        >>> total = walker.total_size("/var/log")
        >>> walker.errors  # paths that could not be read
        []
    """

    def __init__(self) -> None:
        self.errors: list[WalkError] = []

    def iter_file_sizes(self, root: str) -> Iterator[tuple[str, int]]:
        """Yield ``(path, size)`` for every regular file below ``root``.

        If ``root`` is itself a regular file, its own size is yielded.

        Args:
            root: Path to walk.

        Yields:
            Tuples of file path and size in bytes.
        """
        try:
            root_stat = os.lstat(root)
        except OSError as exc:
            self._record(root, exc)
            return

        if stat.S_ISREG(root_stat.st_mode):
            yield root, root_stat.st_size
            return
        if not stat.S_ISDIR(root_stat.st_mode):
            return

        pending = [root]
        while pending:
            current = pending.pop()
            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as exc:
                self._record(current, exc)
                continue

            for entry in entries:
                try:
                    entry_stat = entry.stat(follow_symlinks=False)
                except OSError as exc:
                    self._record(entry.path, exc)
                    continue

                if stat.S_ISDIR(entry_stat.st_mode):
                    pending.append(entry.path)
                elif stat.S_ISREG(entry_stat.st_mode):
                    yield entry.path, entry_stat.st_size

    def total_size(self, root: str) -> int:
        """Sum the sizes of all regular files below ``root``.

        Args:
            root: Path to walk.

        Returns:
            Total size in bytes (0 for empty or fully unreadable trees).
        """
        return sum(size for _path, size in self.iter_file_sizes(root))

    def _record(self, path: str, exc: OSError) -> None:
        error = WalkError(path=path, message=exc.strerror or str(exc))
        logger.debug("Walk error at %s: %s", path, error.message)
        self.errors.append(error)
