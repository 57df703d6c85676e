"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

import typer
from rich.console import Console

from vnscript.cli.formatters.json_formatter import JsonFormatter
from vnscript.config import get_logger
from vnscript.exceptions import ValidationError, VNScriptError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with the given exit code
        """
        error_msg = error.message if isinstance(error, VNScriptError) else str(error)
        logger.error("Command failed", error=error_msg, exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error_msg, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error_msg}[/red]")
        else:
            self.console.print(f"[red]Error: {error_msg}[/red]")
            if isinstance(error, VNScriptError) and error.hint:
                self.console.print(f"[yellow]Hint: {error.hint}[/yellow]")

        raise typer.Exit(exit_code)
