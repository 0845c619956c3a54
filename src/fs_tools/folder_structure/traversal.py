"""Recursive construction of a filtered folder tree from the filesystem.

The traversal is depth-first and single-threaded. Every directory is listed once,
each child is checked against the filter policy before anything is done with it,
and a folder node is only created after all of its children are complete and
sorted. Once the whole tree is built it is annotated in a single bottom-up pass.

Errors split into two groups. FilteredError and EmptyFolderError mean "nothing to
show here" and are absorbed by the parent directory, which just leaves the child
out. TraversalIOError means a directory could not be listed; it aborts the whole
traversal so that no partial tree is ever returned.
"""

import os
from pathlib import Path
from typing import List

from fs_tools.exceptions import EmptyFolderError, FilteredError, TraversalIOError
from fs_tools.folder_structure.annotation import annotate
from fs_tools.folder_structure.filter_policy import is_hidden, is_valid_name, should_include_file, should_include_item
from fs_tools.folder_structure.item import FileItem, FolderItem, Item, sort_items
from fs_tools.folder_structure.options import FolderStructureOptions
from fs_tools.types import PathType

CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."


def build_folder_structure(path: PathType, options: FolderStructureOptions) -> Item:
    """Build the annotated folder tree rooted at ``path``.

    Args:
        path: A directory to walk, or a single file.
        options: Filtering options.

    Returns:
        A FolderItem for a directory, or a FileItem if ``path`` is an accepted file.
        Every folder in the returned tree is annotated.

    Raises:
        TraversalIOError: If any directory in the tree cannot be listed, including
            a root that does not exist.
        FilteredError: If ``path`` is a file rejected by the extension filters.
        EmptyFolderError: If nothing is left to show under ``path`` and
            ``options.show_empty_folder`` is False.

    Example:
        >>> options = FolderStructureOptions(include_extension_only=["py"])
        >>> root = build_folder_structure("src", options)  # doctest: +SKIP
        >>> root.has_visible_file  # doctest: +SKIP
        True
    """
    root = _build(Path(path), options)
    annotate(root)
    return root


def get_path_name(path: Path) -> str:
    """Return the display name of a path.

    The current-directory token keeps its ``.`` spelling; any other path is shown by
    its final component, which is empty for paths such as ``/`` or ``a/..``.

    Example:
        >>> get_path_name(Path("."))
        '.'
        >>> get_path_name(Path("projects/app"))
        'app'
        >>> get_path_name(Path("/"))
        ''
        >>> get_path_name(Path(".."))
        ''
    """
    if str(path) == CURRENT_DIRECTORY:
        return CURRENT_DIRECTORY
    if path.name == PARENT_DIRECTORY:
        return ""
    return path.name


def _build(path: Path, options: FolderStructureOptions) -> Item:
    name = get_path_name(path)

    if path.is_file():
        if should_include_file(name, options):
            return FileItem(name)
        raise FilteredError(str(path))

    items = sort_items(_collect_children(path, options))
    if not items and not options.show_empty_folder:
        raise EmptyFolderError(str(path))

    return FolderItem(name, items)


def _collect_children(path: Path, options: FolderStructureOptions) -> List[Item]:
    try:
        with os.scandir(path) as entries:
            child_names = [entry.name for entry in entries]
    except OSError as e:
        raise TraversalIOError(str(path), e.strerror or str(e)) from e

    items: List[Item] = []
    for child_name in child_names:
        # Rejected names are never descended into
        if not is_valid_name(child_name) or is_hidden(child_name):
            continue
        if not should_include_item(child_name, options):
            continue

        try:
            items.append(_build(path / child_name, options))
        except (FilteredError, EmptyFolderError):
            continue

    return items
