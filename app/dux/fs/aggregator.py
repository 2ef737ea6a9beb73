"""Concurrent subdirectory size aggregation.

For one directory listing, starts one walk per immediate subdirectory,
waits for every walk to report, then publishes each subdirectory's
total into its entry. Results are merged only after the full barrier,
so no entry is ever read while a worker could still write it.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from dux.fs.models import FsEntry, SizeResult, WalkError
from dux.fs.walker import TreeWalker

logger = logging.getLogger(__name__)


def compute_subtree_size(path: str) -> SizeResult:
    """Walk one subtree and sum its regular-file sizes.

    Args:
        path: Subdirectory to walk.

    Returns:
        SizeResult with the total and any walk warnings.
    """
    walker = TreeWalker()
    total = walker.total_size(path)
    return SizeResult(path=path, size_bytes=total, errors=tuple(walker.errors))


class SizeAggregator:
    """Resolves the sizes of all directory entries in a listing.

    Args:
        max_workers: Upper bound on concurrent walks. None starts one
            worker per subdirectory.
        compute: Function computing one subtree's SizeResult.
    """

    def __init__(
        self,
        *,
        max_workers: int | None = None,
        compute: Callable[[str], SizeResult] = compute_subtree_size,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self._max_workers = max_workers
        self._compute = compute

    def resolve(self, entries: list[FsEntry]) -> tuple[list[FsEntry], list[WalkError]]:
        """Compute every pending directory size and merge the results.

        Entries keep their order. Each directory entry is replaced at most
        once, matched to its result by exact path equality.

        Args:
            entries: DirectoryLister output for one directory.

        Returns:
            Tuple of (resolved entries, walk warnings).
        """
        directories = [e.full_path for e in entries if e.is_directory and not e.is_resolved]
        if not directories:
            return list(entries), []

        sizes = self._fan_out(directories)

        warnings: list[WalkError] = []
        for result in sizes.values():
            warnings.extend(result.errors)
        for warning in warnings:
            logger.warning("Walk error at %s: %s", warning.path, warning.message)

        merged: list[FsEntry] = []
        for entry in entries:
            result = sizes.get(entry.full_path)
            if entry.is_directory and not entry.is_resolved and result is not None:
                merged.append(entry.with_size(result.size_bytes))
            else:
                merged.append(entry)
        return merged, warnings

    def _fan_out(self, directories: list[str]) -> dict[str, SizeResult]:
        """Run one computation per directory and wait for all of them."""
        workers = self._max_workers or len(directories)
        results: dict[str, SizeResult] = {}

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dux-size") as executor:
            future_to_path: dict[Future[SizeResult], str] = {
                executor.submit(self._compute, path): path for path in directories
            }
            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    result = future.result()
                except Exception as e:
                    logger.exception("Size computation failed for %s", path)
                    result = SizeResult(
                        path=path,
                        size_bytes=0,
                        errors=(WalkError(path=path, message=str(e)),),
                    )
                results[result.path] = result

        logger.debug("Resolved %d subdirectory sizes with %d workers", len(results), workers)
        return results
