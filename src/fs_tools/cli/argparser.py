"""Command-line argument parsing for fs-tools.

This module defines the command-line interface for fs-tools,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from fs_tools import __version__
from fs_tools.exclusion_rules.git_rules import GitIgnoreExclusionRules


def comma_separated(value: str) -> List[str]:
    """Split a comma-separated option value, dropping empty entries.

    Example:
        >>> comma_separated("rs, toml,,md")
        ['rs', 'toml', 'md']
    """
    return [part.strip() for part in value.split(",") if part.strip()]


def extension_list(value: str) -> List[str]:
    """Split a comma-separated list of extensions and strip their leading dots.

    Example:
        >>> extension_list(".rs,toml")
        ['rs', 'toml']
    """
    return [ext.lstrip(".") for ext in comma_separated(value)]


def create_ignore_action(ignore_rules: GitIgnoreExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds glob patterns into an exclusion rules object.

    Patterns given directly and patterns read from files end up in the same rules
    object, in the order they appear on the command line, so later negations can
    override earlier patterns.

    Args:
        ignore_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        """Action that adds glob patterns to the rules object as they are parsed."""

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-g", "--ignore-file"):
                ignore_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                ignore_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return IgnoreRulesAction


def create_parser(ignore_rules: GitIgnoreExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        ignore_rules: The glob exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with the fs-tools commands.
    """
    description = """
    fs-tools: file system utility tools.

    The tree command prints a directory hierarchy the way the Unix tree utility does,
    with filters on file extension and entry name. Hidden entries (names starting
    with a dot) are never shown. Folders left without any file after filtering are
    hidden unless --show-empty is given.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      fs-tools tree

      # Only Rust and TOML files
      fs-tools tree --include rs,toml /path/to/project

      # Everything except compiled files
      fs-tools tree --exclude pyc,pyo /path/to/project

      # Drop entries whose name matches a regular expression
      fs-tools tree --exclude-pattern '^target$,^node_modules$' /path/to/project

      # Drop entries whose name matches gitignore-style globs
      fs-tools tree -i '*.log' -i '!keep.log' /path/to/project
      fs-tools tree -g ignore-names.txt /path/to/project

      # Keep folders that end up empty, and print counts to stderr
      fs-tools tree --show-empty --summary stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="fs-tools",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fs-tools {__version__}", help="Show the version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    tree_parser = subparsers.add_parser(
        "tree",
        help="Display directory structure as a tree",
        description="Display directory structure as a tree.",
    )

    IgnoreAction = create_ignore_action(ignore_rules)

    tree_parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory path to start from (default: current directory).",
    )
    tree_parser.add_argument(
        "-s",
        "--show-empty",
        action="store_true",
        help="Show folders that contain no file after filtering.",
    )
    tree_parser.add_argument(
        "--include",
        type=extension_list,
        action="extend",
        metavar="EXTS",
        help="Comma-separated file extensions to include exclusively (can be specified multiple times).",
    )
    tree_parser.add_argument(
        "--exclude",
        type=extension_list,
        action="extend",
        metavar="EXTS",
        help="Comma-separated file extensions to exclude (can be specified multiple times).",
    )
    tree_parser.add_argument(
        "--exclude-pattern",
        type=comma_separated,
        action="extend",
        metavar="REGEXES",
        help=(
            "Comma-separated regular expressions; files and folders whose name matches any of them are "
            "excluded (can be specified multiple times)."
        ),
    )
    tree_parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="GLOB",
        dest="ignore",
        action=IgnoreAction,
        help=(
            "Gitignore-style glob matched against each entry's name (e.g. '*.log', '!keep.log'). Can be "
            "specified multiple times and is processed in order together with -g/--ignore-file."
        ),
    )
    tree_parser.add_argument(
        "-g",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        dest="ignore",
        action=IgnoreAction,
        help="File with one gitignore-style glob per line (can be specified multiple times).",
    )
    tree_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    tree_parser.add_argument(
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print directory and file counts after the tree. Valid destinations: stderr, stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.include and args.exclude:
        raise ValueError("--include and --exclude cannot be used together")
