"""Sorted, fully sized directory listings.

Composes the lister, the size aggregator and the sorter into the single
"list and size a directory" operation used by the navigation engine,
and derives the numbered rows the user selects from.
"""

import logging
import time
from dataclasses import dataclass, field

from dux.fs.aggregator import SizeAggregator
from dux.fs.lister import DirectoryLister
from dux.fs.models import FsEntry, SizeStatus, WalkError

logger = logging.getLogger(__name__)


def sort_entries(entries: list[FsEntry]) -> list[FsEntry]:
    """Order entries by size, largest first.

    Ties are broken by name, then files before directories, so the
    order is reproducible. Unreadable entries rank below all others.

    Args:
        entries: Entries to sort.

    Returns:
        New sorted list.
    """
    return sorted(entries, key=lambda e: (-e.sort_size, e.name, e.is_directory))


@dataclass(frozen=True, slots=True)
class ListingRow:
    """One visible row of a rendered listing.

    Attributes:
        entry: The entry shown on this row.
        index: Selection number (directories only), None for files.
    """

    entry: FsEntry
    index: int | None = None


@dataclass(frozen=True, slots=True)
class Listing:
    """The sorted, size-resolved children of one directory.

    Attributes:
        path: Directory the listing describes.
        entries: Entries sorted largest first.
        warnings: Paths that could not be read while sizing subdirectories.
        hide_empty: Whether entries smaller than one byte are hidden.
    """

    path: str
    entries: tuple[FsEntry, ...]
    warnings: tuple[WalkError, ...] = field(default=())
    hide_empty: bool = True

    def rows(self) -> list[ListingRow]:
        """Return the visible rows in display order.

        Entries with a resolved size below one byte are hidden (when
        ``hide_empty`` is set). Visible directories are numbered from 1
        in display order; files never get a number. Unreadable files
        stay visible.
        """
        rows: list[ListingRow] = []
        next_index = 1
        for entry in self.entries:
            if (
                self.hide_empty
                and entry.status == SizeStatus.RESOLVED
                and entry.sort_size < 1
            ):
                continue
            if entry.is_directory:
                rows.append(ListingRow(entry=entry, index=next_index))
                next_index += 1
            else:
                rows.append(ListingRow(entry=entry))
        return rows

    def directory_for_index(self, index: int) -> FsEntry | None:
        """Find the directory entry shown with number ``index``.

        Args:
            index: Selection number typed by the user.

        Returns:
            The matching directory entry, or None if no row has that number.
        """
        for row in self.rows():
            if row.index == index:
                return row.entry
        return None

    @property
    def total_size(self) -> int:
        """Sum of all known entry sizes."""
        return sum(e.size_bytes for e in self.entries if e.size_bytes is not None)


class ListingBuilder:
    """Builds a Listing: list children, size subdirectories, sort.

    Args:
        lister: Directory lister to read children with.
        aggregator: Aggregator that resolves subdirectory sizes.
        hide_empty: Passed through to every Listing.
    """

    def __init__(
        self,
        lister: DirectoryLister | None = None,
        aggregator: SizeAggregator | None = None,
        *,
        hide_empty: bool = True,
    ) -> None:
        self._lister = lister or DirectoryLister()
        self._aggregator = aggregator or SizeAggregator()
        self._hide_empty = hide_empty

    def build(self, path: str) -> Listing:
        """Produce the sorted, sized listing for ``path``.

        Returns only after every subdirectory size is resolved.

        Args:
            path: Directory to list.

        Returns:
            Listing for ``path``.

        Raises:
            DirectoryUnreadableError: If ``path`` cannot be read.
        """
        started = time.monotonic()
        entries = self._lister.list_directory(path)
        resolved, warnings = self._aggregator.resolve(entries)
        listing = Listing(
            path=path,
            entries=tuple(sort_entries(resolved)),
            warnings=tuple(warnings),
            hide_empty=self._hide_empty,
        )
        logger.debug(
            "Listed %s: %d entries in %.2fs",
            path,
            len(listing.entries),
            time.monotonic() - started,
        )
        return listing
