"""Command-line interface for fs-tools."""
