"""Compile scenario text into executable labels.

Compilation happens in two stages. ``compile_step_plans`` is a pure left
fold over classified lines that tracks the current speaking character and
produces StepPlan records. ``create_label_from_scenario`` then binds each
plan to the presentation engine, audio layer and character registry as an
async step.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import reduce
from typing import assert_never

from vnscript.config import VNScriptSettings, get_logger, get_settings
from vnscript.exceptions import ParseError
from vnscript.labels.interfaces import (
    AudioLayer,
    CharacterRegistry,
    DialogueNotifier,
    PresentationEngine,
)
from vnscript.labels.models import (
    DialogueRecord,
    ExecutableLabel,
    LayerSpec,
    Step,
    StepKind,
    StepPlan,
    StepResult,
    StepStatus,
)
from vnscript.parser.line_classifier import classify_line, split_script_lines
from vnscript.parser.models import DialogueLine, Directive, DirectiveKind

logger = get_logger(__name__)

PROLOGUE_LABEL_ID = "prologue"
BACKGROUND_LAYER_ID = "background"
CHARACTER_LAYER_ID = "character"

_Action = Callable[[StepPlan], Awaitable[None]]

_DIRECTIVE_STEP_KINDS: dict[DirectiveKind, StepKind] = {
    DirectiveKind.BACKGROUND: StepKind.BACKGROUND,
    DirectiveKind.BGM: StepKind.BGM,
    DirectiveKind.SE: StepKind.SE,
    DirectiveKind.CHARACTER: StepKind.CHARACTER,
}


@dataclass(frozen=True)
class _FoldState:
    # plans is one list shared by every state of a single fold
    current_character: str = ""
    plans: list[StepPlan] = field(default_factory=list)


def _fold_line(state: _FoldState, numbered_line: tuple[int, str]) -> _FoldState:
    line_number, line = numbered_line
    classified = classify_line(line)
    if classified is None:
        return state

    index = len(state.plans)
    if isinstance(classified, Directive):
        plan = StepPlan(
            index=index,
            kind=_DIRECTIVE_STEP_KINDS[classified.kind],
            content=classified.value,
            character=state.current_character,
            line_number=line_number,
        )
        state.plans.append(plan)
        return state

    current = _next_character(state.current_character, classified)
    kind = StepKind.MONOLOGUE if classified.is_monologue else StepKind.DIALOGUE
    plan = StepPlan(
        index=index,
        kind=kind,
        content=classified.text,
        character=current,
        line_number=line_number,
    )
    state.plans.append(plan)
    return _FoldState(current, state.plans)


def _next_character(current: str, line: DialogueLine) -> str:
    # Only header lines change the speaker; content lines keep it.
    if line.character:
        return line.character
    return current


def compile_step_plans(scenario_text: str) -> tuple[StepPlan, ...]:
    """Fold scenario text into step plans.

    Args:
        scenario_text: Raw script text

    Returns:
        One plan per directive or dialogue line, in document order
    """
    if not isinstance(scenario_text, str):
        raise ParseError(
            message="Invalid scenario text: expected a string",
            details={"received_type": type(scenario_text).__name__},
        )
    state = reduce(
        _fold_line,
        enumerate(split_script_lines(scenario_text), start=1),
        _FoldState(),
    )
    return tuple(state.plans)


class StepBinder:
    """Bind step plans to the external collaborators."""

    def __init__(
        self,
        engine: PresentationEngine,
        audio: AudioLayer,
        registry: CharacterRegistry,
        notify: DialogueNotifier,
        settings: VNScriptSettings | None = None,
    ) -> None:
        """Initialize the binder.

        Args:
            engine: Presentation engine receiving layers and dialogue records
            audio: Audio layer receiving playback requests
            registry: Character registry used to resolve display names
            notify: Called with each new dialogue record after it is set
            settings: Settings for track ids, volumes and stage geometry
        """
        self.engine = engine
        self.audio = audio
        self.registry = registry
        self.notify = notify
        self.settings = settings or get_settings()

    def bind(self, plan: StepPlan) -> Step:
        """Create the async step callback for a plan."""
        match plan.kind:
            case StepKind.BACKGROUND:
                return self._guarded(plan, self._show_background)
            case StepKind.BGM:
                return self._guarded(plan, self._play_bgm)
            case StepKind.SE:
                return self._guarded(plan, self._play_se)
            case StepKind.CHARACTER:
                return self._guarded(plan, self._show_character)
            case StepKind.DIALOGUE | StepKind.MONOLOGUE:
                return self._dialogue_step(plan)
            case _:
                assert_never(plan.kind)

    def resolve_display_name(self, name: str) -> str:
        """Map known character names to their registered display identity."""
        key = self.settings.character_keys.get(name)
        if key is None:
            return name
        return self.registry.get(key) or name

    def background_layer(self, plan: StepPlan) -> LayerSpec:
        width = self.settings.stage_width
        height = self.settings.stage_height
        return LayerSpec(
            x=width // 2,
            y=height // 2,
            width=width,
            height=height,
            source=plan.content,
        )

    def character_layer(self, plan: StepPlan) -> LayerSpec:
        return LayerSpec(
            x=self.settings.stage_width // 2,
            y=self.settings.portrait_baseline,
            width=self.settings.portrait_width,
            height=self.settings.portrait_height,
            anchor_y=1.0,
            source=plan.content,
        )

    async def _show_background(self, plan: StepPlan) -> None:
        logger.info("Setting background", background=plan.content)
        await _maybe_await(
            self.engine.add_layer(BACKGROUND_LAYER_ID, self.background_layer(plan))
        )

    async def _show_character(self, plan: StepPlan) -> None:
        logger.info("Adding character", character=plan.content)
        await _maybe_await(
            self.engine.add_layer(CHARACTER_LAYER_ID, self.character_layer(plan))
        )

    async def _play_bgm(self, plan: StepPlan) -> None:
        logger.info("Playing BGM", bgm=plan.content)
        self.audio.play(
            self.settings.bgm_track,
            loop=self.settings.bgm_loop,
            volume=self.settings.bgm_volume,
        )

    async def _play_se(self, plan: StepPlan) -> None:
        logger.info("Playing SE", se=plan.content)
        self.audio.play(
            self.settings.se_track, loop=False, volume=self.settings.se_volume
        )

    def _guarded(self, plan: StepPlan, action: _Action) -> Step:
        async def step() -> StepResult:
            try:
                await action(plan)
            except Exception as e:
                logger.warning(
                    "Step failed, continuing",
                    step=plan.index,
                    kind=plan.kind.value,
                    content=plan.content,
                    error=str(e),
                )
                return StepResult(
                    index=plan.index,
                    kind=plan.kind,
                    status=StepStatus.DEGRADED,
                    reason=f"{type(e).__name__}: {e}",
                )
            return StepResult(index=plan.index, kind=plan.kind)

        return step

    def _dialogue_step(self, plan: StepPlan) -> Step:
        async def step() -> StepResult:
            record = DialogueRecord(
                character=self.resolve_display_name(plan.character),
                text=plan.content,
                is_monologue=plan.kind is StepKind.MONOLOGUE,
            )
            self.engine.set_dialogue(record)
            self.notify(record)
            return StepResult(index=plan.index, kind=plan.kind)

        return step


async def _maybe_await(result: object) -> None:
    if inspect.isawaitable(result):
        await result


def create_label_from_scenario(
    label_id: str,
    scenario_text: str,
    *,
    engine: PresentationEngine,
    audio: AudioLayer,
    registry: CharacterRegistry,
    notify: DialogueNotifier,
    settings: VNScriptSettings | None = None,
) -> ExecutableLabel:
    """Compile scenario text into an executable label.

    Args:
        label_id: Name of the label
        scenario_text: Raw script text
        engine: Presentation engine receiving layers and dialogue records
        audio: Audio layer receiving playback requests
        registry: Character registry used to resolve display names
        notify: Called with each new dialogue record after it is set
        settings: Optional settings; the global settings are used otherwise

    Returns:
        Label whose steps run against the given collaborators
    """
    plans = compile_step_plans(scenario_text)
    binder = StepBinder(engine, audio, registry, notify, settings)
    steps = tuple(binder.bind(plan) for plan in plans)
    logger.debug("Compiled label", label_id=label_id, steps=len(steps))
    return ExecutableLabel(id=label_id, steps=steps, plans=plans)


def create_prologue_label(
    scenario_text: str,
    *,
    engine: PresentationEngine,
    audio: AudioLayer,
    registry: CharacterRegistry,
    notify: DialogueNotifier,
    settings: VNScriptSettings | None = None,
) -> ExecutableLabel:
    """Compile the prologue label."""
    return create_label_from_scenario(
        PROLOGUE_LABEL_ID,
        scenario_text,
        engine=engine,
        audio=audio,
        registry=registry,
        notify=notify,
        settings=settings,
    )
