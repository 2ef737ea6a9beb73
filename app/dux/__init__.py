"""dux - interactive disk usage explorer.

Lists the immediate children of a directory sorted by total on-disk size
and lets the user drill down into subdirectories.
"""

__version__ = "0.1.0"
