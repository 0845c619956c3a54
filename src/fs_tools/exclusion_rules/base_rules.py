from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class for name-based exclusion rules.

    An exclusion rule answers a single question: should an entry with this name be
    left out of the tree? Rules are consulted with the bare name of a file or folder
    (``"build"``, ``"main.py"``), never with a path, and they apply to files and
    folders alike. Excluding a folder excludes its entire subtree, since traversal
    never descends into it.

    Implementations may also support adding patterns one at a time through
    ``add_rule``; the default implementation raises NotImplementedError.

    Example:
        >>> from fs_tools.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules()
        >>> rules.add_rule(r"^target$")
        >>> rules.exclude("target")
        True
        >>> rules.exclude("src")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The final path component of a file or folder.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.

        Example:
            >>> class SuffixRules(BaseExclusionRules):
            ...     def exclude(self, name: str) -> bool:
            ...         return name.endswith("~")
            >>> SuffixRules().exclude("notes.txt~")
            True
            >>> SuffixRules().exclude("notes.txt")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion pattern.

        Args:
            rule (str): The pattern to add. Its syntax depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True if at least one pattern is configured."""
        return True
