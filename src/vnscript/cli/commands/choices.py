"""Parse a choice block from a line range of a scenario file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vnscript.cli.formatters.base import OutputFormat
from vnscript.cli.formatters.scene_formatter import ChoiceFormatter
from vnscript.cli.utils.cli_handler import CLIHandler
from vnscript.common.file_source import read_scenario_lines
from vnscript.config import get_settings_for_cli
from vnscript.exceptions import ValidationError
from vnscript.parser import ScenarioParser

console = Console()


def choices_command(
    script: Annotated[Path, typer.Argument(help="Scenario file to read")],
    start: Annotated[
        int, typer.Option("--start", "-s", help="First line of the choice block")
    ],
    end: Annotated[
        int | None,
        typer.Option("--end", "-e", help="Last line of the choice block"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Parse the choice block found between two line numbers.

    Line numbers are 1-based and inclusive. Without --end the block runs
    until the first blank line after a choice.
    """
    handler = CLIHandler(console)
    try:
        if start < 1 or (end is not None and end < start):
            raise ValidationError(
                message=f"Invalid line range: {start}..{end}",
                hint="--start must be at least 1 and --end must not precede it.",
                details={"start": start, "end": end},
            )
        settings = get_settings_for_cli(config_file=config)
        lines = read_scenario_lines(script, start, end, settings.script_encoding)
        choices = ScenarioParser().parse_choices(lines)
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    formatter = ChoiceFormatter(console)
    if json_output:
        print(formatter.format(choices, OutputFormat.JSON))
    else:
        console.print(
            formatter.format(choices, OutputFormat.TABLE), end="", markup=False
        )
