"""Tree nodes representing the files and folders that survived filtering."""

from typing import Iterable, Optional, Tuple, Union

from anytree import NodeMixin


class FileItem(NodeMixin):  # type: ignore
    """A file in the folder tree.

    A file is always a visible file, so ``has_visible_file`` is fixed to True.

    Attributes:
        name (str): The file name.
        parent (Optional[FolderItem]): The containing folder, set when the folder is built.

    Example:
        >>> item = FileItem("main.rs")
        >>> item.name, item.is_folder, item.has_visible_file
        ('main.rs', False, True)
    """

    is_folder = False
    has_visible_file = True
    is_annotated = True

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"FileItem({self.name!r})"


class FolderItem(NodeMixin):  # type: ignore
    """A folder in the folder tree.

    Children are handed over complete and already sorted; the folder adopts them as
    anytree children at construction time and they are not changed afterwards.

    ``has_visible_file`` records whether any file exists anywhere below the folder.
    It stays None until ``annotate`` runs over the tree; ``build_folder_structure``
    always does that before returning.

    Attributes:
        name (str): The folder name, or ``"."`` for a root given as the current directory.
        children (Tuple[Item, ...]): The child items, in display order (from anytree).
        has_visible_file (Optional[bool]): The annotation computed by ``annotate``.

    Example:
        >>> folder = FolderItem("src", [FileItem("lib.rs")])
        >>> [child.name for child in folder.children]
        ['lib.rs']
        >>> folder.has_visible_file is None
        True
    """

    is_folder = True

    def __init__(self, name: str, children: Iterable["Item"] = ()) -> None:
        super().__init__()
        self.name = name
        self.children = tuple(children)
        self.has_visible_file: Optional[bool] = None

    @property
    def is_annotated(self) -> bool:
        return self.has_visible_file is not None

    def __repr__(self) -> str:
        return f"FolderItem({self.name!r}, {list(self.children)!r})"


Item = Union[FileItem, FolderItem]


def sort_key(item: Item) -> Tuple[bool, str]:
    """Folders first, then files; names compared case-sensitively within each kind."""
    return (not item.is_folder, item.name)


def sort_items(items: Iterable[Item]) -> Tuple[Item, ...]:
    """Return siblings in display order.

    Example:
        >>> items = [FileItem("b.txt"), FolderItem("z"), FileItem("a.txt"), FolderItem("m")]
        >>> [item.name for item in sort_items(items)]
        ['m', 'z', 'a.txt', 'b.txt']
    """
    return tuple(sorted(items, key=sort_key))
