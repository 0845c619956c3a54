"""Tree-drawing text output for folder trees."""

import sys
from typing import Iterator, List, Optional, TextIO

from fs_tools.exceptions import TreeNotAnnotatedError
from fs_tools.folder_structure.item import Item
from fs_tools.folder_structure.options import FolderStructureOptions

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "


def is_displayed(item: Item, options: FolderStructureOptions) -> bool:
    """Decide whether an item is printed at all.

    Files always are. Folders without any visible file below them are hidden unless
    ``options.show_empty_folder`` is set, together with their whole subtree.

    Raises:
        TreeNotAnnotatedError: If a folder has not been annotated yet.
    """
    if not item.is_folder or options.show_empty_folder:
        return True
    if not item.is_annotated:
        raise TreeNotAnnotatedError(item.name)
    return item.has_visible_file


def stream_tree(root: Item, options: FolderStructureOptions) -> Iterator[str]:
    """Generate the tree representation one line at a time.

    Children are printed in the order already stored in the tree. The root folder is
    printed by its bare name; every other folder gets a trailing ``/``. Because the
    root counts as a last sibling, its children sit behind a four-space prefix.

    Args:
        root: An annotated tree, as returned by ``build_folder_structure``.
        options: The options the tree was built with.

    Yields:
        Lines of the tree, without trailing newlines.

    Raises:
        TreeNotAnnotatedError: If the tree was never annotated and empty folders are hidden.

    Example:
        >>> from fs_tools.folder_structure.annotation import annotate
        >>> from fs_tools.folder_structure.item import FileItem, FolderItem
        >>> root = FolderItem("proj", [FolderItem("src", [FileItem("lib.rs")]), FileItem("main.rs")])
        >>> _ = annotate(root)
        >>> for line in stream_tree(root, FolderStructureOptions()):
        ...     print(line)
        proj
            ├── src/
            │   └── lib.rs
            └── main.rs
    """

    def write_item(item: Item, prefix: str, is_last: bool, is_root: bool) -> Iterator[str]:
        connector = LAST_BRANCH if is_last else BRANCH

        if not item.is_folder:
            yield f"{prefix}{connector}{item.name}"
            return

        if is_root:
            yield item.name
        else:
            yield f"{prefix}{connector}{item.name}/"

        child_prefix = prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX)
        visible: List[Item] = [child for child in item.children if is_displayed(child, options)]
        for i, child in enumerate(visible):
            yield from write_item(child, child_prefix, i == len(visible) - 1, is_root=False)

    if not is_displayed(root, options):
        return

    yield from write_item(root, "", is_last=True, is_root=True)


def get_tree_representation(root: Item, options: FolderStructureOptions) -> str:
    """Return the complete tree representation as a single string."""
    return "\n".join(stream_tree(root, options))


def print_tree(root: Item, options: FolderStructureOptions, file: Optional[TextIO] = None) -> None:
    """Write the tree to ``file``, one entry per line.

    Args:
        root: An annotated tree.
        options: The options the tree was built with.
        file: Destination stream. Defaults to standard output.
    """
    out = file if file is not None else sys.stdout
    for line in stream_tree(root, options):
        print(line, file=out)
