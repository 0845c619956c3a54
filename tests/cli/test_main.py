"""Unit tests for the CLI main module."""

import argparse
import io
from unittest.mock import patch

import pytest

from fs_tools.cli.main import build_options, compile_patterns, main, write_tree
from fs_tools.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fs_tools.exclusion_rules.regex_rules import RegexExclusionRules
from fs_tools.folder_structure.annotation import annotate
from fs_tools.folder_structure.item import FileItem, FolderItem
from fs_tools.folder_structure.options import FolderStructureOptions


def run_main(*argv):
    """Run main() with the given arguments and return its exit code (0 if it returned normally)."""
    with patch("sys.argv", ["fs-tools", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def make_args(**overrides):
    values = dict(include=None, exclude=None, exclude_pattern=None, show_empty=False)
    values.update(overrides)
    return argparse.Namespace(**values)


def test_compile_patterns_skips_invalid(capsys):
    compiled = compile_patterns(["^ok$", "([", "fine"])
    assert [p.pattern for p in compiled] == ["^ok$", "fine"]
    assert "Warning: Invalid regex pattern '(['" in capsys.readouterr().err


def test_compile_patterns_none():
    assert compile_patterns(None) == []


def test_build_options_defaults():
    options = build_options(make_args(), GitIgnoreExclusionRules())
    assert options == FolderStructureOptions()


def test_build_options_all_filters():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    options = build_options(
        make_args(include=["rs"], exclude_pattern=["^target$"], show_empty=True),
        rules,
    )
    assert options.include_extension_only == ("rs",)
    assert options.show_empty_folder is True
    regexes, globs = options.exclude_by_filter
    assert isinstance(regexes, RegexExclusionRules)
    assert regexes.exclude("target")
    assert globs is rules


def test_build_options_rejects_both_extension_filters():
    with pytest.raises(ValueError):
        build_options(make_args(include=["rs"], exclude=["md"]), GitIgnoreExclusionRules())


def test_write_tree_with_summary_on_stdout(capsys):
    root = FolderItem("r", [FolderItem("d", [FileItem("a.txt")]), FileItem("b.txt")])
    annotate(root)
    out = io.StringIO()
    write_tree(root, FolderStructureOptions(), out, summary="stdout")
    assert out.getvalue() == (
        "r\n    ├── d/\n    │   └── a.txt\n    └── b.txt\n\nDirectories: 1\nFiles: 2\n"
    )
    assert capsys.readouterr().err == ""


def test_main_prints_tree(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--include", "rs")
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == [
        "proj",
        "    ├── src/",
        "    │   ├── util/",
        "    │   │   └── mod.rs",
        "    │   └── lib.rs",
        "    ├── target/",
        "    │   └── debug/",
        "    │       └── app.rs",
        "    └── main.rs",
    ]
    assert captured.err == ""


def test_main_exclude_pattern_and_glob(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--exclude-pattern", "^target$", "-i", "*.md")
    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "proj",
        "    ├── src/",
        "    │   ├── util/",
        "    │   │   └── mod.rs",
        "    │   └── lib.rs",
        "    └── main.rs",
    ]


def test_main_show_empty(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--show-empty", "--exclude", "rs")
    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert "    ├── assets/" in lines
    assert "    ├── src/" in lines


def test_main_summary_to_stderr(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--summary", "stderr")
    captured = capsys.readouterr()
    assert code == 0
    assert captured.err == "Directories: 5\nFiles: 6\n"
    assert "Directories" not in captured.out


def test_main_output_file(sample_project, tmp_path, capsys):
    output = tmp_path / "tree.txt"
    code = run_main("tree", str(sample_project), "--include", ".rs", "-o", str(output))
    assert code == 0
    assert capsys.readouterr().out == ""
    assert output.read_text(encoding="utf-8").splitlines()[0] == "proj"
    assert output.read_text(encoding="utf-8").endswith("    └── main.rs\n")


def test_main_include_and_exclude_conflict(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--include", "rs", "--exclude", "md")
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Error: --include and --exclude cannot be used together" in captured.err


def test_main_empty_root(tmp_path, capsys):
    code = run_main("tree", str(tmp_path))
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith("Error creating folder tree: Nothing to show in folder:")


def test_main_missing_root(tmp_path, capsys):
    code = run_main("tree", str(tmp_path / "missing"))
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Error creating folder tree: Cannot read directory" in captured.err


def test_main_filtered_file_root(tmp_path, capsys):
    path = tmp_path / "README.md"
    path.touch()
    code = run_main("tree", str(path), "--include", "rs")
    assert code == 1
    assert "Error creating folder tree: Filtered out:" in capsys.readouterr().err


def test_main_invalid_regex_is_skipped(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--exclude-pattern", "([,^target$")
    captured = capsys.readouterr()
    assert code == 0
    assert "Warning: Invalid regex pattern '(['" in captured.err
    assert "target/" not in captured.out


def test_main_missing_ignore_file(sample_project, tmp_path, capsys):
    code = run_main("tree", str(sample_project), "-g", str(tmp_path / "missing"))
    assert code == 1
    assert "Error: Rules file not found" in capsys.readouterr().err


def test_main_syntax_error(capsys):
    assert run_main("tree", "--summary", "nowhere") == 2


def test_main_keyboard_interrupt(sample_project):
    with patch("fs_tools.cli.main.build_folder_structure", side_effect=KeyboardInterrupt):
        assert run_main("tree", str(sample_project)) == 130


def test_main_broken_pipe(sample_project):
    with patch("fs_tools.cli.main.write_tree", side_effect=BrokenPipeError), patch(
        "fs_tools.cli.main.silence_stdout"
    ) as mock_silence:
        assert run_main("tree", str(sample_project)) == 141
    mock_silence.assert_called_once_with()


def test_regex_patterns_are_name_only(sample_project, capsys):
    code = run_main("tree", str(sample_project), "--exclude-pattern", "src/util")
    assert code == 0
    assert "util/" in capsys.readouterr().out
