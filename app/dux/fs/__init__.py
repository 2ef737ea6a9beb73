"""Filesystem listing and size aggregation.

This module provides the directory lister, the concurrent subtree size
aggregator, the sorter and the composed listing builder.
"""

from dux.fs.aggregator import SizeAggregator, compute_subtree_size
from dux.fs.lister import DirectoryLister, DirectoryUnreadableError
from dux.fs.listing import Listing, ListingBuilder, ListingRow, sort_entries
from dux.fs.models import FsEntry, SizeResult, SizeStatus, WalkError
from dux.fs.walker import TreeWalker

__all__ = [
    "DirectoryLister",
    "DirectoryUnreadableError",
    "FsEntry",
    "Listing",
    "ListingBuilder",
    "ListingRow",
    "SizeAggregator",
    "SizeResult",
    "SizeStatus",
    "TreeWalker",
    "WalkError",
    "compute_subtree_size",
    "sort_entries",
]
