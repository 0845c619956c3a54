"""Counts of the folders and files shown in a rendered tree."""

from typing import NamedTuple

from anytree import PreOrderIter

from fs_tools.folder_structure.item import Item
from fs_tools.folder_structure.options import FolderStructureOptions
from fs_tools.folder_structure.renderer import is_displayed


class TreeSummary(NamedTuple):
    """Number of folders (root excluded) and files that the renderer prints."""

    directories: int
    files: int


def summarize(root: Item, options: FolderStructureOptions) -> TreeSummary:
    """Count the folders and files that ``stream_tree`` would print.

    Hidden folders are pruned with their whole subtree, exactly as the renderer
    prunes them. The root folder itself is not counted.

    Example:
        >>> from fs_tools.folder_structure.annotation import annotate
        >>> from fs_tools.folder_structure.item import FileItem, FolderItem
        >>> root = FolderItem(".", [FolderItem("src", [FileItem("a.py")]), FileItem("b.py")])
        >>> _ = annotate(root)
        >>> summarize(root, FolderStructureOptions())
        TreeSummary(directories=1, files=2)
    """
    if not is_displayed(root, options):
        return TreeSummary(0, 0)

    directories = 0
    files = 0
    for item in PreOrderIter(root, stop=lambda node: not is_displayed(node, options)):
        if item is root and item.is_folder:
            continue
        if item.is_folder:
            directories += 1
        else:
            files += 1

    return TreeSummary(directories, files)


def format_summary(summary: TreeSummary) -> str:
    """Format a summary into a human-readable string.

    Example:
        >>> print(format_summary(TreeSummary(3, 12)))
        Directories: 3
        Files: 12
    """
    return "\n".join(
        [
            f"Directories: {summary.directories}",
            f"Files: {summary.files}",
        ]
    )
