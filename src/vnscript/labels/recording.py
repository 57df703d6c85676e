"""In-memory collaborators that record what a label asks of them.

Used for dry runs from the CLI and in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vnscript.labels.models import DialogueRecord, LayerSpec


@dataclass
class RecordingEngine:
    """Presentation engine that records layers and dialogue records."""

    layers: list[tuple[str, LayerSpec]] = field(default_factory=list)
    dialogue: DialogueRecord | None = None
    history: list[DialogueRecord] = field(default_factory=list)

    async def add_layer(self, layer_id: str, spec: LayerSpec) -> None:
        self.layers.append((layer_id, spec))

    def set_dialogue(self, record: DialogueRecord) -> None:
        self.dialogue = record
        self.history.append(record)


@dataclass
class RecordingAudio:
    """Audio layer that records playback requests."""

    played: list[dict[str, Any]] = field(default_factory=list)

    def play(self, track_id: str, *, loop: bool, volume: float) -> None:
        self.played.append({"track_id": track_id, "loop": loop, "volume": volume})


class StaticCharacterRegistry:
    """Character registry backed by a fixed key to display-name mapping."""

    def __init__(self, names: dict[str, str] | None = None) -> None:
        self._names = dict(names or {})

    def get(self, key: str) -> str | None:
        return self._names.get(key)


@dataclass
class RecordingNotifier:
    """Notification channel that collects refresh signals."""

    records: list[DialogueRecord] = field(default_factory=list)

    def __call__(self, record: DialogueRecord) -> None:
        self.records.append(record)
