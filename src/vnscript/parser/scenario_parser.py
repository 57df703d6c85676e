"""Scenario script compiler.

Folds the lines of a script document into an immutable ScenarioDocument.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, assert_never

from vnscript.config import get_logger
from vnscript.exceptions import ParseError
from vnscript.parser.line_classifier import (
    CHAPTER_MARKER,
    SEPARATOR_MARKER,
    TITLE_MARKER,
    classify_dialogue,
    classify_directive,
    split_script_lines,
)
from vnscript.parser.models import (
    Choice,
    DialogueLine,
    Directive,
    DirectiveKind,
    ScenarioDocument,
    Scene,
    SceneType,
)

logger = get_logger(__name__)


class ScenarioParser:
    """Parse scenario scripts into scenes and choice blocks."""

    CHOICE_HEADER = "選択肢"
    CHOICE_ITEM_PATTERNS = (
        re.compile(r"^[0-9]+\.\s*(.+)$"),
        re.compile(r"^[-＊]\s*(.+)$"),
    )
    # "text→target［route］", both target and route optional
    CHOICE_TARGET_PATTERN = re.compile(
        r"^(?P<text>.+?)(?:→(?P<target>[^［］]*?))?\s*(?:［(?P<route>[^［］]+)］)?$"
    )

    def parse_scenario_file(self, content: str) -> ScenarioDocument:
        """Parse a whole scenario document.

        Args:
            content: Raw script text

        Returns:
            Parsed ScenarioDocument with scenes in document order

        Raises:
            ParseError: If content is not a string
        """
        if not isinstance(content, str):
            raise ParseError(
                message="Invalid scenario content: expected a string",
                hint="Read the script file as text before parsing it.",
                details={"received_type": type(content).__name__},
            )

        lines = split_script_lines(content)
        title = self._extract_header(lines, TITLE_MARKER)
        chapter = self._extract_header(lines, CHAPTER_MARKER)

        scenes: list[Scene] = []
        counter = 0
        for line_number, line in enumerate(lines, start=1):
            scene = self._build_scene(line, counter + 1, line_number)
            if scene is None:
                continue
            counter += 1
            scenes.append(scene)

        logger.debug(
            "Parsed scenario",
            title=title,
            scenes=len(scenes),
            skipped_lines=len(lines) - len(scenes),
        )
        return ScenarioDocument(title=title, chapter=chapter, scenes=tuple(scenes))

    def parse_choices(self, lines: Iterable[str]) -> tuple[Choice, ...]:
        """Parse one pre-sliced choice block.

        The caller decides where the block starts and ends; lines that are
        not choice items are ignored, and the block ends at the first blank
        line after a choice has been read.

        Args:
            lines: Lines of the decision block in authored order

        Returns:
            Choices in authored order

        Raises:
            ParseError: If lines is a single string or not iterable
        """
        if isinstance(lines, str) or not isinstance(lines, Iterable):
            raise ParseError(
                message="Invalid choice block: expected an iterable of lines",
                hint="Split the block text with split_script_lines() first.",
                details={"received_type": type(lines).__name__},
            )

        choices: list[Choice] = []
        for line in lines:
            stripped = line.strip()
            if not stripped:
                if choices:
                    break
                continue
            if stripped.startswith((self.CHOICE_HEADER, SEPARATOR_MARKER)):
                continue

            item = self._match_choice_item(stripped)
            if item is None:
                continue
            choices.append(self._build_choice(len(choices) + 1, item))

        return tuple(choices)

    def _extract_header(self, lines: list[str], marker: str) -> str:
        for line in lines:
            stripped = line.strip()
            if stripped.startswith(marker):
                return stripped[len(marker) :].strip()
        return ""

    def _build_scene(self, line: str, number: int, line_number: int) -> Scene | None:
        directive = classify_directive(line)
        if directive is not None:
            return self._directive_scene(directive, line, number, line_number)

        dialogue = classify_dialogue(line)
        if dialogue is not None:
            return self._dialogue_scene(dialogue, number, line_number)
        return None

    def _directive_scene(
        self, directive: Directive, line: str, number: int, line_number: int
    ) -> Scene:
        fields: dict[str, Any] = {}
        match directive.kind:
            case DirectiveKind.BACKGROUND:
                fields["background"] = directive.value
            case DirectiveKind.BGM:
                fields["bgm"] = directive.value
            case DirectiveKind.SE:
                fields["se"] = directive.value
            case DirectiveKind.CHARACTER:
                fields["character"] = directive.value
            case _:
                assert_never(directive.kind)

        return Scene(
            id=f"scene_{number}",
            type=SceneType.DIRECTIVE,
            content=line.strip(),
            number=number,
            line_number=line_number,
            **fields,
        )

    def _dialogue_scene(
        self, dialogue: DialogueLine, number: int, line_number: int
    ) -> Scene:
        return Scene(
            id=f"scene_{number}",
            type=SceneType.DIALOGUE,
            content=dialogue.text,
            number=number,
            line_number=line_number,
            character=dialogue.character,
            is_monologue=dialogue.is_monologue,
        )

    def _match_choice_item(self, line: str) -> str | None:
        for pattern in self.CHOICE_ITEM_PATTERNS:
            match = pattern.match(line)
            if match:
                return match.group(1).strip()
        return None

    def _build_choice(self, number: int, item: str) -> Choice:
        match = self.CHOICE_TARGET_PATTERN.match(item)
        if match is None:
            return Choice(id=f"choice_{number}", text=item)
        return Choice(
            id=f"choice_{number}",
            text=match.group("text").strip(),
            next_scene=(match.group("target") or "").strip(),
            route_change=match.group("route"),
        )


_default_parser = ScenarioParser()


def parse_scenario_file(content: str) -> ScenarioDocument:
    """Parse a scenario document with a shared parser instance."""
    return _default_parser.parse_scenario_file(content)


def parse_choices(lines: Iterable[str]) -> tuple[Choice, ...]:
    """Parse a pre-sliced choice block with a shared parser instance."""
    return _default_parser.parse_choices(lines)
