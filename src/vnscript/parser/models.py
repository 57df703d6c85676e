"""Data models for scenario script parsing."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class DirectiveKind(str, Enum):
    """Kinds of tagged script directives."""

    BACKGROUND = "background"
    BGM = "bgm"
    SE = "se"
    CHARACTER = "character"


class SceneType(str, Enum):
    """Kinds of compiled scenes."""

    DIRECTIVE = "directive"
    DIALOGUE = "dialogue"
    CHOICE = "choice"
    BACKGROUND = "background"
    CHARACTER = "character"


@dataclass(frozen=True)
class Directive:
    """A tagged, non-dialogue instruction such as 【背景】."""

    kind: DirectiveKind
    value: str


@dataclass(frozen=True)
class DialogueLine:
    """A classified dialogue or narration line.

    Header lines carry ``character`` and an empty ``text``; content lines
    carry ``text`` and an empty ``character``.
    """

    character: str
    text: str
    is_monologue: bool = False

    @property
    def is_header(self) -> bool:
        """Whether this line names a speaker rather than carrying content."""
        return bool(self.character) and not self.text


@dataclass(frozen=True)
class Choice:
    """One branch offered to the player at a decision point."""

    id: str
    text: str
    next_scene: str = ""
    route_change: str | None = None


@dataclass(frozen=True)
class Scene:
    """Represents one compiled unit of a scenario."""

    id: str
    type: SceneType
    content: str
    number: int
    line_number: int
    character: str | None = None
    background: str | None = None
    bgm: str | None = None
    se: str | None = None
    choices: tuple[Choice, ...] | None = None
    is_monologue: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping, omitting unset optional fields."""
        data = asdict(self)
        data["type"] = self.type.value
        if self.choices is not None:
            data["choices"] = [asdict(choice) for choice in self.choices]
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class ScenarioDocument:
    """Represents a parsed scenario script."""

    title: str
    chapter: str
    scenes: tuple[Scene, ...] = field(default_factory=tuple)

    def dialogue_scenes(self) -> tuple[Scene, ...]:
        """Scenes produced by dialogue, monologue and narration lines."""
        return tuple(s for s in self.scenes if s.type is SceneType.DIALOGUE)

    def directive_scenes(self) -> tuple[Scene, ...]:
        """Scenes produced by tagged directives."""
        return tuple(s for s in self.scenes if s.type is SceneType.DIRECTIVE)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the whole document."""
        return {
            "title": self.title,
            "chapter": self.chapter,
            "scenes": [scene.to_dict() for scene in self.scenes],
        }
