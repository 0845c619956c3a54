"""Options controlling which entries appear in a folder tree."""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple

from fs_tools.exceptions import InvalidOptionsError
from fs_tools.exclusion_rules.base_rules import BaseExclusionRules
from fs_tools.exclusion_rules.regex_rules import RegexExclusionRules


@dataclass(frozen=True)
class FolderStructureOptions:
    """Immutable filtering and display options for building and rendering a folder tree.

    Extension filters are plain suffix checks on file names: an entry ``"rs"`` accepts
    ``main.rs`` (and also ``bars``). ``exclude_extension`` and ``include_extension_only``
    are mutually exclusive; supplying both raises InvalidOptionsError at construction.

    ``exclude_by_filter`` holds name matchers. Any BaseExclusionRules works; compiled
    regular expressions are accepted too and wrapped in RegexExclusionRules. Pattern
    text is rejected, since compiling patterns is the caller's job.

    Attributes:
        exclude_extension: Suffixes of files to leave out.
        include_extension_only: Suffixes of the only files to keep.
        exclude_by_filter: Name matchers; a match on any of them excludes the entry.
        show_empty_folder: Keep and render folders that contain no visible file.

    Example:
        >>> options = FolderStructureOptions(include_extension_only=["py"])
        >>> options.include_extension_only
        ('py',)
        >>> FolderStructureOptions(exclude_extension=["md"], include_extension_only=["py"])
        Traceback (most recent call last):
        ...
        fs_tools.exceptions.InvalidOptionsError: Cannot specify both exclude_extension and include_extension_only
    """

    exclude_extension: Tuple[str, ...] = field(default_factory=tuple)
    include_extension_only: Tuple[str, ...] = field(default_factory=tuple)
    exclude_by_filter: Tuple[BaseExclusionRules, ...] = field(default_factory=tuple)
    show_empty_folder: bool = False

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "exclude_extension", _as_str_tuple("exclude_extension", self.exclude_extension))
        object.__setattr__(
            self, "include_extension_only", _as_str_tuple("include_extension_only", self.include_extension_only)
        )
        object.__setattr__(self, "exclude_by_filter", tuple(_as_rule(item) for item in self.exclude_by_filter))
        object.__setattr__(self, "show_empty_folder", bool(self.show_empty_folder))

        if self.exclude_extension and self.include_extension_only:
            raise InvalidOptionsError("Cannot specify both exclude_extension and include_extension_only")


def _as_str_tuple(field_name: str, values: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(values, str):
        raise TypeError(f"{field_name} must be a collection of strings, not a single string")
    return tuple(values)


def _as_rule(item: Any) -> BaseExclusionRules:
    if isinstance(item, BaseExclusionRules):
        return item
    if isinstance(item, re.Pattern):
        return RegexExclusionRules([item])
    raise TypeError(
        f"exclude_by_filter entries must be exclusion rules or compiled patterns, got {type(item).__name__}"
    )
