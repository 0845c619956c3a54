"""Command-line interface for fs-tools.

This module provides the command-line entry point. It parses the arguments, turns
them into FolderStructureOptions, builds the folder tree and writes it out.

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid options, unreadable directory, nothing to show)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Tree of a project, Python files only
    $ fs-tools tree --include py /path/to/project

    # Display version information
    $ fs-tools --version
"""

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from fs_tools.cli.argparser import create_parser, validate_args
from fs_tools.exceptions import FolderStructureError
from fs_tools.exclusion_rules.base_rules import BaseExclusionRules
from fs_tools.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fs_tools.exclusion_rules.regex_rules import RegexExclusionRules
from fs_tools.folder_structure.item import Item
from fs_tools.folder_structure.options import FolderStructureOptions
from fs_tools.folder_structure.renderer import stream_tree
from fs_tools.folder_structure.summary import format_summary, summarize
from fs_tools.folder_structure.traversal import build_folder_structure


def compile_patterns(patterns: Optional[Iterable[str]]) -> List[re.Pattern[str]]:
    """Compile regular expressions, warning about and skipping invalid ones.

    Args:
        patterns: Expression texts, or None.

    Returns:
        The expressions that compiled, in their original order.
    """
    compiled: List[re.Pattern[str]] = []
    for pattern in patterns or ():
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            print(f"Warning: Invalid regex pattern '{pattern}': {e}", file=sys.stderr)
    return compiled


def build_options(args: argparse.Namespace, ignore_rules: GitIgnoreExclusionRules) -> FolderStructureOptions:
    """Translate parsed arguments into FolderStructureOptions.

    Regular expressions are checked before glob patterns.

    Raises:
        InvalidOptionsError: If both extension filters are given.
    """
    exclude_by_filter: List[BaseExclusionRules] = []

    regexes = compile_patterns(args.exclude_pattern)
    if regexes:
        exclude_by_filter.append(RegexExclusionRules(regexes))
    if ignore_rules.has_rules():
        exclude_by_filter.append(ignore_rules)

    return FolderStructureOptions(
        exclude_extension=tuple(args.exclude or ()),
        include_extension_only=tuple(args.include or ()),
        exclude_by_filter=tuple(exclude_by_filter),
        show_empty_folder=args.show_empty,
    )


def write_tree(root: Item, options: FolderStructureOptions, out: TextIO, summary: Optional[str] = None) -> None:
    """Write the tree, and optionally its summary, to the given stream."""
    for line in stream_tree(root, options):
        out.write(line + "\n")

    if summary:
        counts = format_summary(summarize(root, options))
        if summary == "stdout":
            out.write("\n" + counts + "\n")
        elif summary == "stderr":
            print(counts, file=sys.stderr)


def silence_stdout() -> None:
    """Point stdout at the null device so interpreter shutdown doesn't report the broken pipe."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main() -> None:
    """Main entry point for the fs-tools command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        # Populated by -i/-g while parsing
        ignore_rules = GitIgnoreExclusionRules()

        parser = create_parser(ignore_rules)
        args = parser.parse_args()

        validate_args(args)
        options = build_options(args, ignore_rules)

        try:
            root = build_folder_structure(args.path, options)
        except FolderStructureError as e:
            print(f"Error creating folder tree: {e}", file=sys.stderr)
            sys.exit(1)

        if args.output:
            with Path(args.output).open("w", encoding="utf-8") as out:
                write_tree(root, options, out, args.summary)
        else:
            write_tree(root, options, sys.stdout, args.summary)
            sys.stdout.flush()

    except BrokenPipeError:
        silence_stdout()
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
