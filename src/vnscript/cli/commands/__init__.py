"""vnscript CLI commands."""

from __future__ import annotations

from vnscript.cli.commands.choices import choices_command
from vnscript.cli.commands.parse import parse_command
from vnscript.cli.commands.run import run_command

__all__ = [
    "choices_command",
    "parse_command",
    "run_command",
]
