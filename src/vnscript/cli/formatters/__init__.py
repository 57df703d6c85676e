"""Output formatters for the vnscript CLI."""

from vnscript.cli.formatters.base import OutputFormat, OutputFormatter
from vnscript.cli.formatters.json_formatter import JsonFormatter
from vnscript.cli.formatters.scene_formatter import (
    ChoiceFormatter,
    SceneFormatter,
    StepTraceFormatter,
)

__all__ = [
    "ChoiceFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "SceneFormatter",
    "StepTraceFormatter",
]
