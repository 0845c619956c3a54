class FolderStructureError(Exception):
    """
    Base class for the outcomes that stop a path from becoming part of a folder tree.

    Subclasses carry the path that could not be represented. ``FilteredError`` and
    ``EmptyFolderError`` are recoverable: the parent directory simply omits the child.
    ``TraversalIOError`` is fatal and aborts the whole traversal.

    Attributes:
        path (str): The path the error refers to.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class TraversalIOError(FolderStructureError):
    """
    Exception raised when a directory cannot be listed.

    The original ``OSError`` is chained as ``__cause__``; only its human-readable
    description is kept in the message.

    Example:
        >>> error = TraversalIOError("/srv/data", "Permission denied")
        >>> str(error)
        'Cannot read directory /srv/data: Permission denied'
    """

    def __init__(self, path: str, reason: str = "I/O error") -> None:
        super().__init__(path, f"Cannot read directory {path}: {reason}")


class FilteredError(FolderStructureError):
    """
    Exception raised when a file is rejected by the extension filters.

    Example:
        >>> str(FilteredError("notes.md"))
        'Filtered out: notes.md'
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Filtered out: {path}")


class EmptyFolderError(FolderStructureError):
    """
    Exception raised when a folder has no children left to show.

    An empty directory on disk and a directory whose entries were all filtered out
    raise the same error.

    Example:
        >>> str(EmptyFolderError("build"))
        'Nothing to show in folder: build'
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Nothing to show in folder: {path}")


class InvalidOptionsError(ValueError):
    """Exception raised when folder structure options are mutually inconsistent."""

    pass


class TreeNotAnnotatedError(ValueError):
    """
    Exception raised when a folder is rendered before its visibility annotation was computed.

    Trees returned by ``build_folder_structure`` are always annotated; this only
    happens with hand-built trees that skipped ``annotate``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Folder has not been annotated: {name!r}")
