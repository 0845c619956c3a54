"""Test configuration and fixtures for fs-tools."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree with hidden entries, mixed extensions and empty folders.

    proj/
        .git/config
        README.md
        main.rs
        assets/            (empty)
        docs/guide.md
        src/lib.rs
        src/util/mod.rs
        target/debug/app.rs
    """
    root = tmp_path / "proj"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n")
    (root / "README.md").write_text("# proj\n")
    (root / "main.rs").write_text("fn main() {}\n")
    (root / "assets").mkdir()
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("guide\n")
    (root / "src" / "util").mkdir(parents=True)
    (root / "src" / "lib.rs").write_text("pub mod util;\n")
    (root / "src" / "util" / "mod.rs").write_text("\n")
    (root / "target" / "debug").mkdir(parents=True)
    (root / "target" / "debug" / "app.rs").write_text("\n")
    return root


@pytest.fixture
def make_files():
    """Return a helper that creates empty files (and their parent folders) below a base directory."""

    def _make_files(base: Path, *relative_paths: str) -> Path:
        for relative_path in relative_paths:
            path = base / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        return base

    return _make_files
