"""Name matchers used to exclude files and folders by pattern."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .regex_rules import RegexExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "RegexExclusionRules",
]
