"""Data models for executable scenario labels."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum


class StepKind(str, Enum):
    """Kinds of executable narrative steps."""

    BACKGROUND = "background"
    BGM = "bgm"
    SE = "se"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    MONOLOGUE = "monologue"


class StepStatus(str, Enum):
    """Outcome of running a single step."""

    OK = "ok"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class StepPlan:
    """Collaborator-free description of one step.

    ``character`` is the speaker in effect when the line was read, carried
    over from the last header for narration and quoted lines.
    """

    index: int
    kind: StepKind
    content: str
    character: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class LayerSpec:
    """Visual parameters for a presentation-engine layer."""

    x: int
    y: int
    width: int
    height: int
    anchor_x: float = 0.5
    anchor_y: float = 0.5
    source: str = ""


@dataclass(frozen=True)
class DialogueRecord:
    """The active dialogue entry written to the presentation engine."""

    character: str
    text: str
    is_monologue: bool = False


@dataclass(frozen=True)
class StepResult:
    """Result of running one step; degraded steps carry the failure reason."""

    index: int
    kind: StepKind
    status: StepStatus = StepStatus.OK
    reason: str | None = None

    @property
    def degraded(self) -> bool:
        return self.status is StepStatus.DEGRADED


Step = Callable[[], Awaitable[StepResult]]


@dataclass(frozen=True)
class ExecutableLabel:
    """A named, ordered sequence of narrative steps."""

    id: str
    steps: tuple[Step, ...] = field(default_factory=tuple)
    plans: tuple[StepPlan, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)
