"""Parse a scenario file into scenes."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vnscript.cli.formatters.base import OutputFormat
from vnscript.cli.formatters.scene_formatter import SceneFormatter
from vnscript.cli.utils.cli_handler import CLIHandler
from vnscript.common.file_source import read_scenario_text
from vnscript.config import get_settings_for_cli
from vnscript.parser import ScenarioParser

console = Console()


def parse_command(
    script: Annotated[Path, typer.Argument(help="Scenario file to parse")],
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
    """Parse a scenario script and list its scenes."""
    handler = CLIHandler(console)
    try:
        settings = get_settings_for_cli(config_file=config)
        content = read_scenario_text(script, settings.script_encoding)
        document = ScenarioParser().parse_scenario_file(content)
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    formatter = SceneFormatter(console)
    if json_output:
        print(formatter.format(document, OutputFormat.JSON))
    else:
        console.print(
            formatter.format(document, OutputFormat.TABLE), end="", markup=False
        )
        console.print(f"[green]{len(document.scenes)} scenes[/green]")
