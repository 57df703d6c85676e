"""Dry-run a scenario label against recording collaborators."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vnscript.cli.formatters.base import OutputFormat
from vnscript.cli.formatters.scene_formatter import StepTraceFormatter
from vnscript.cli.utils.cli_handler import CLIHandler
from vnscript.common.file_source import read_scenario_text
from vnscript.config import get_settings_for_cli
from vnscript.labels import LabelRunner, create_label_from_scenario
from vnscript.labels.recording import (
    RecordingAudio,
    RecordingEngine,
    RecordingNotifier,
    StaticCharacterRegistry,
)

console = Console()


def run_command(
    script: Annotated[Path, typer.Argument(help="Scenario file to run")],
    label_id: Annotated[
        str, typer.Option("--label-id", "-l", help="Label name")
    ] = "prologue",
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
    """Compile a scenario into a label and run it without a presentation engine.

    Every step is executed in order against in-memory collaborators and the
    resulting trace is printed.
    """
    handler = CLIHandler(console)
    try:
        settings = get_settings_for_cli(config_file=config)
        content = read_scenario_text(script, settings.script_encoding)
        label = create_label_from_scenario(
            label_id,
            content,
            engine=RecordingEngine(),
            audio=RecordingAudio(),
            registry=StaticCharacterRegistry(settings.character_names),
            notify=RecordingNotifier(),
            settings=settings,
        )
        results = asyncio.run(LabelRunner().run(label))
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    trace = list(zip(label.plans, results, strict=True))
    formatter = StepTraceFormatter(console)
    if json_output:
        print(formatter.format(trace, OutputFormat.JSON))
    else:
        console.print(f"[bold cyan]Label {label.id}[/bold cyan]")
        console.print(
            formatter.format(trace, OutputFormat.TABLE), end="", markup=False
        )
