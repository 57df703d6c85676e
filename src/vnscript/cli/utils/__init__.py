"""Shared helpers for vnscript CLI commands."""

from vnscript.cli.utils.cli_handler import CLIHandler

__all__ = ["CLIHandler"]
