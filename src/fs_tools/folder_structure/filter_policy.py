"""Predicates deciding which entries survive filtering."""

from fs_tools.folder_structure.options import FolderStructureOptions


def is_hidden(name: str) -> bool:
    """Return True for dot-prefixed names, which are always skipped."""
    return name.startswith(".")


def is_valid_name(name: str) -> bool:
    """Return False for names that are not valid UTF-8 on disk; such entries are skipped.

    Undecodable bytes reach Python as lone surrogates, which cannot be encoded back
    to UTF-8 for output.

    Example:
        >>> is_valid_name("main.rs")
        True
        >>> is_valid_name("bad\\udcff.txt")
        False
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def should_include_file(name: str, options: FolderStructureOptions) -> bool:
    """Decide whether a file is kept according to the extension filters.

    With no extension filters every file is kept. Otherwise exactly one of the two
    filters is set (they are mutually exclusive by construction): an exclusion list
    drops names ending with any listed suffix, an inclusion list keeps only names
    ending with one of its suffixes.

    Args:
        name: The file name.
        options: The active options.

    Returns:
        True if the file should appear in the tree.

    Example:
        >>> options = FolderStructureOptions(include_extension_only=["rs"])
        >>> should_include_file("main.rs", options)
        True
        >>> should_include_file("README.md", options)
        False
    """
    if options.exclude_extension:
        return not any(name.endswith(ext) for ext in options.exclude_extension)

    if options.include_extension_only:
        return any(name.endswith(ext) for ext in options.include_extension_only)

    return True


def should_include_item(name: str, options: FolderStructureOptions) -> bool:
    """Decide whether a file or folder survives the name filters.

    Args:
        name: The bare name of the entry.
        options: The active options.

    Returns:
        False if any matcher in ``options.exclude_by_filter`` excludes the name.
    """
    return not any(rule.exclude(name) for rule in options.exclude_by_filter)
