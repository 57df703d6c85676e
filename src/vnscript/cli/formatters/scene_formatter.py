"""Scene, choice and step-trace formatters for CLI."""

from __future__ import annotations

import io
from typing import Any

from rich.console import Console
from rich.table import Table

from vnscript.cli.formatters.base import OutputFormat, OutputFormatter
from vnscript.cli.formatters.json_formatter import JsonFormatter
from vnscript.labels.models import StepPlan, StepResult
from vnscript.parser.models import Choice, ScenarioDocument, Scene, SceneType


def _render(table: Table) -> str:
    string_io = io.StringIO()
    Console(file=string_io, force_terminal=False, width=120).print(table)
    return string_io.getvalue()


def _scene_detail(scene: Scene) -> str:
    if scene.type is SceneType.DIRECTIVE:
        for name in ("background", "bgm", "se", "character"):
            value = getattr(scene, name)
            if value is not None:
                return f"{name}: {value}"
    if scene.character:
        marker = " (monologue)" if scene.is_monologue else ""
        return f"{scene.character}{marker}"
    return "monologue" if scene.is_monologue else ""


class SceneFormatter(OutputFormatter[ScenarioDocument]):
    """Formatter for parsed scenario documents."""

    def format(
        self, data: ScenarioDocument, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)

        table = Table(
            title=data.title or "Untitled",
            caption=data.chapter or None,
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("ID", style="cyan")
        table.add_column("Line", justify="right")
        table.add_column("Type")
        table.add_column("Detail", style="green")
        table.add_column("Content")
        for scene in data.scenes:
            table.add_row(
                scene.id,
                str(scene.line_number),
                scene.type.value,
                _scene_detail(scene),
                scene.content,
            )
        return _render(table)


class ChoiceFormatter(OutputFormatter[tuple[Choice, ...]]):
    """Formatter for parsed choice blocks."""

    def format(
        self, data: tuple[Choice, ...], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(list(data))
        if not data:
            return "No choices found\n"

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan")
        table.add_column("Text")
        table.add_column("Next Scene")
        table.add_column("Route")
        for choice in data:
            table.add_row(
                choice.id, choice.text, choice.next_scene, choice.route_change or ""
            )
        return _render(table)


class StepTraceFormatter(OutputFormatter[list[tuple[StepPlan, StepResult]]]):
    """Formatter for the step-by-step trace of a label run."""

    def format(
        self,
        data: list[tuple[StepPlan, StepResult]],
        format_type: OutputFormat = OutputFormat.TABLE,
    ) -> str:
        if format_type == OutputFormat.JSON:
            rows: list[dict[str, Any]] = [
                {
                    "index": plan.index,
                    "kind": plan.kind.value,
                    "line": plan.line_number,
                    "character": plan.character,
                    "content": plan.content,
                    "status": result.status.value,
                    "reason": result.reason,
                }
                for plan, result in data
            ]
            return JsonFormatter().format(rows)

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right")
        table.add_column("Kind", style="cyan")
        table.add_column("Character", style="green")
        table.add_column("Content")
        table.add_column("Status")
        for plan, result in data:
            status = (
                f"[yellow]{result.status.value}: {result.reason}[/yellow]"
                if result.degraded
                else result.status.value
            )
            table.add_row(
                str(plan.index), plan.kind.value, plan.character, plan.content, status
            )
        return _render(table)
