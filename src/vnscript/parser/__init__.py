"""Scenario script parser for vnscript."""

from __future__ import annotations

from .line_classifier import (
    classify_dialogue,
    classify_directive,
    classify_line,
    is_skippable,
    split_script_lines,
)
from .models import (
    Choice,
    DialogueLine,
    Directive,
    DirectiveKind,
    ScenarioDocument,
    Scene,
    SceneType,
)
from .scenario_parser import ScenarioParser, parse_choices, parse_scenario_file

__all__ = [
    "Choice",
    "DialogueLine",
    "Directive",
    "DirectiveKind",
    "ScenarioDocument",
    "ScenarioParser",
    "Scene",
    "SceneType",
    "classify_dialogue",
    "classify_directive",
    "classify_line",
    "is_skippable",
    "parse_choices",
    "parse_scenario_file",
    "split_script_lines",
]
