"""Collaborator contracts consumed by executable labels."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from vnscript.labels.models import DialogueRecord, LayerSpec


@runtime_checkable
class PresentationEngine(Protocol):
    """Engine that owns layers and the active dialogue record."""

    def add_layer(self, layer_id: str, spec: LayerSpec) -> Awaitable[None] | None:
        """Place a layer; may return an awaitable completion signal."""
        ...

    def set_dialogue(self, record: DialogueRecord) -> None:
        """Replace the active dialogue record."""
        ...


@runtime_checkable
class AudioLayer(Protocol):
    """Fire-and-forget audio playback."""

    def play(self, track_id: str, *, loop: bool, volume: float) -> None:
        """Start playing a track."""
        ...


@runtime_checkable
class CharacterRegistry(Protocol):
    """Synchronous lookup from character key to display identity."""

    def get(self, key: str) -> str | None:
        """Return the display identity for key, or None when unregistered."""
        ...


DialogueNotifier = Callable[[DialogueRecord], None]
