"""Implementation of name exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from fs_tools.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore glob syntax, applied to entry names.

    Patterns are compiled by the pathspec library exactly as Git would compile them,
    but they are only ever tested against the bare name of each entry. Globs such as
    ``*.log``, ``build`` or ``test_*`` work as expected, and later negation patterns
    (``!keep.log``) re-include names matched by earlier ones. Patterns that only make
    sense against a path (``docs/*.md``) or that are restricted to directories
    (``build/``) never match a bare name.

    Patterns can be loaded from one or more files, one pattern per line with ``#``
    comments, or added individually with ``add_rule``. Either way they are kept in
    the order they were supplied.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.exclude("server.log")
        True
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore-style patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str) -> bool:
        """Check if a name matches the loaded patterns.

        Args:
            name: The bare name of a file or folder.

        Returns:
            True if the last pattern that matches the name is not a negation.
        """
        return bool(self.spec.match_file(name))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore-style patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore-style pattern.

        Args:
            rule: A pattern such as ``"*.pyc"`` or ``"!important.pyc"``.
        """
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
