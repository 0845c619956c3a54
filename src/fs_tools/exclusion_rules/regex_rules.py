"""Exclusion rules built from regular expressions."""

import re
from typing import Iterable, List, Optional

from .base_rules import BaseExclusionRules


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules that match entry names against regular expressions.

    A name is excluded when ANY of the configured expressions finds a match anywhere
    in it (``re.search`` semantics, not ``re.fullmatch``). Anchor the expression with
    ``^`` and ``$`` to match a whole name.

    Patterns can be supplied already compiled, which is how the command-line layer
    hands them over, or added one at a time as text with ``add_rule``.

    Attributes:
        patterns (List[re.Pattern[str]]): Compiled expressions, in the order they were added.

    Example:
        >>> rules = RegexExclusionRules([re.compile(r"^node_modules$")])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("my_node_modules_notes.txt")
        False
        >>> rules.add_rule(r"\\.bak$")
        >>> rules.exclude("config.bak")
        True
    """

    def __init__(self, patterns: Optional[Iterable[re.Pattern[str]]] = None):
        """Initialize RegexExclusionRules.

        Args:
            patterns: Compiled regular expressions. Defaults to no patterns.

        Raises:
            TypeError: If any pattern is not a compiled regular expression.
        """
        self.patterns: List[re.Pattern[str]] = []
        for pattern in patterns or ():
            if not isinstance(pattern, re.Pattern):
                raise TypeError(f"Expected a compiled regular expression, got {type(pattern).__name__}")
            self.patterns.append(pattern)

    def exclude(self, name: str) -> bool:
        """Check whether any expression matches the name.

        Args:
            name: The bare name of a file or folder.

        Returns:
            True if any expression matches, False otherwise.
        """
        return any(pattern.search(name) is not None for pattern in self.patterns)

    def add_rule(self, rule: str) -> None:
        """Compile and add a single regular expression.

        Args:
            rule: The expression text, e.g. ``r"^build$"``.

        Raises:
            re.error: If the expression is not valid.
        """
        self.patterns.append(re.compile(rule))

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"RegexExclusionRules({[p.pattern for p in self.patterns]!r})"
