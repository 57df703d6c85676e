"""Executable scenario labels for vnscript."""

from __future__ import annotations

from .compiler import (
    StepBinder,
    compile_step_plans,
    create_label_from_scenario,
    create_prologue_label,
)
from .interfaces import (
    AudioLayer,
    CharacterRegistry,
    DialogueNotifier,
    PresentationEngine,
)
from .models import (
    DialogueRecord,
    ExecutableLabel,
    LayerSpec,
    Step,
    StepKind,
    StepPlan,
    StepResult,
    StepStatus,
)
from .runner import LabelRunner

__all__ = [
    "AudioLayer",
    "CharacterRegistry",
    "DialogueNotifier",
    "DialogueRecord",
    "ExecutableLabel",
    "LabelRunner",
    "LayerSpec",
    "PresentationEngine",
    "Step",
    "StepBinder",
    "StepKind",
    "StepPlan",
    "StepResult",
    "StepStatus",
    "compile_step_plans",
    "create_label_from_scenario",
    "create_prologue_label",
]
