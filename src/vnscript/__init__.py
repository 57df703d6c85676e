"""vnscript: scenario-script interpreter for visual novels.

Parses Japanese screenplay-style scenario scripts (backgrounds, music,
sound effects, character portraits, dialogue, monologue and choices) into
ordered scene records, and compiles them into executable narrative labels
for a presentation engine.
"""

from vnscript.config import VNScriptSettings, get_logger, get_settings
from vnscript.labels import (
    ExecutableLabel,
    LabelRunner,
    create_label_from_scenario,
    create_prologue_label,
)
from vnscript.parser import (
    Choice,
    ScenarioDocument,
    ScenarioParser,
    Scene,
    classify_dialogue,
    classify_directive,
    parse_choices,
    parse_scenario_file,
)

__version__ = "0.1.0"

__all__ = [
    "Choice",
    "ExecutableLabel",
    "LabelRunner",
    "ScenarioDocument",
    "ScenarioParser",
    "Scene",
    "VNScriptSettings",
    "__version__",
    "classify_dialogue",
    "classify_directive",
    "create_label_from_scenario",
    "create_prologue_label",
    "get_logger",
    "get_settings",
    "parse_choices",
    "parse_scenario_file",
]
