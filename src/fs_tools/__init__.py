"""Filesystem tools.

This package renders directory hierarchies as text trees, similar to the
Unix ``tree`` utility, with extension and name-pattern filters.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fs-tools")
except PackageNotFoundError:
    __version__ = "unknown"
