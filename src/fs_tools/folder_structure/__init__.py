"""Filtered folder trees: traversal, annotation and tree-drawing output.

Typical use builds an options object once, walks a directory into an annotated
tree and renders it:

    >>> options = FolderStructureOptions(exclude_extension=["pyc"])
    >>> root = build_folder_structure(".", options)  # doctest: +SKIP
    >>> print_tree(root, options)  # doctest: +SKIP
"""

from .annotation import annotate
from .filter_policy import is_hidden, should_include_file, should_include_item
from .item import FileItem, FolderItem, Item, sort_items
from .options import FolderStructureOptions
from .renderer import get_tree_representation, print_tree, stream_tree
from .summary import TreeSummary, format_summary, summarize
from .traversal import build_folder_structure

__all__ = [
    "FileItem",
    "FolderItem",
    "FolderStructureOptions",
    "Item",
    "TreeSummary",
    "annotate",
    "build_folder_structure",
    "format_summary",
    "get_tree_representation",
    "is_hidden",
    "print_tree",
    "should_include_file",
    "should_include_item",
    "sort_items",
    "stream_tree",
    "summarize",
]
