"""Bottom-up computation of the "contains a visible file" annotation."""

from fs_tools.folder_structure.item import Item


def annotate(item: Item) -> bool:
    """Annotate every folder below ``item`` and report whether ``item`` holds a file.

    Files report True. Each folder stores the OR of its children's results in
    ``has_visible_file`` and returns it. Every child is visited, even after one has
    reported True, so that no folder in the tree is left unannotated.

    Args:
        item: The root of the (sub)tree to annotate.

    Returns:
        True if ``item`` is a file or has a file somewhere below it.

    Example:
        >>> from fs_tools.folder_structure.item import FileItem, FolderItem
        >>> inner = FolderItem("b", [FileItem("c.txt")])
        >>> outer = FolderItem("a", [inner])
        >>> annotate(outer)
        True
        >>> inner.has_visible_file
        True
    """
    if not item.is_folder:
        return True

    results = [annotate(child) for child in item.children]
    has_file = any(results)
    item.has_visible_file = has_file
    return has_file
