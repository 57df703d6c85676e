"""Line classification for scenario scripts.

Every function here is pure: it looks at one line of script text and
decides whether it is a directive, a dialogue header, dialogue/narration
content, or a structural line that carries no scene content.

The markers below are the script format itself. Changing any of them
silently reclassifies existing scripts.
"""

from __future__ import annotations

import re

from vnscript.parser.models import DialogueLine, Directive, DirectiveKind

DIRECTIVE_TAGS: dict[DirectiveKind, str] = {
    DirectiveKind.BACKGROUND: "【背景】",
    DirectiveKind.BGM: "【BGM】",
    DirectiveKind.SE: "【SE】",
    DirectiveKind.CHARACTER: "【立ち絵】",
}

MONOLOGUE_MARKER = "（モノローグ）"
DIALOGUE_OPEN = "「"
DIALOGUE_CLOSE = "」"
TITLE_MARKER = "タイトル："
CHAPTER_MARKER = "章："
SEPARATOR_MARKER = "---"

MAX_CHARACTER_NAME_LENGTH = 15

# A speaker header is one token: no whitespace, parentheses, brackets or
# sentence punctuation.
CHARACTER_HEADER_PATTERN = re.compile(
    r"^([^\s（）()「」『』【】。、，．！？!?…‥：:]+)\s*$"
)


def split_script_lines(text: str) -> list[str]:
    """Split script text on line feeds only.

    A trailing carriage return is removed from each line, and a final line
    feed does not start an extra line. Other Unicode line separators stay
    inside the line they appear in.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def is_skippable(line: str) -> bool:
    """Return True for lines that are structurally present but carry no scene.

    These are blank lines, separator lines, and the title/chapter headers.
    """
    stripped = line.strip()
    return (
        not stripped
        or stripped.startswith(SEPARATOR_MARKER)
        or stripped.startswith(TITLE_MARKER)
        or stripped.startswith(CHAPTER_MARKER)
    )


def classify_directive(line: str) -> Directive | None:
    """Classify a line as a directive.

    Args:
        line: One line of script text

    Returns:
        The directive with its tag removed and value trimmed, or None when
        the line does not start with a directive tag
    """
    stripped = line.strip()
    for kind, tag in DIRECTIVE_TAGS.items():
        if stripped.startswith(tag):
            return Directive(kind=kind, value=stripped[len(tag) :].strip())
    return None


def _is_character_header(line: str) -> bool:
    if MONOLOGUE_MARKER in line or len(line) > MAX_CHARACTER_NAME_LENGTH:
        return False
    return CHARACTER_HEADER_PATTERN.match(line) is not None


def classify_dialogue(line: str) -> DialogueLine | None:
    """Classify a line as dialogue, monologue or narration.

    Rules are tried in order: speaker header, monologue header, quoted
    dialogue, and finally plain prose, which always matches.

    Args:
        line: One line of script text

    Returns:
        The classified line, or None for skippable and directive lines
    """
    if is_skippable(line):
        return None

    stripped = line.strip()
    if classify_directive(stripped) is not None:
        return None

    if _is_character_header(stripped):
        return DialogueLine(character=stripped, text="", is_monologue=False)

    if MONOLOGUE_MARKER in stripped:
        name = stripped.replace(MONOLOGUE_MARKER, "", 1).strip()
        return DialogueLine(character=name, text="", is_monologue=True)

    if (
        len(stripped) > 2
        and stripped.startswith(DIALOGUE_OPEN)
        and stripped.endswith(DIALOGUE_CLOSE)
    ):
        return DialogueLine(character="", text=stripped[1:-1], is_monologue=False)

    return DialogueLine(character="", text=stripped, is_monologue=True)


def classify_line(line: str) -> Directive | DialogueLine | None:
    """Classify a line, offering it to directive classification first."""
    directive = classify_directive(line)
    if directive is not None:
        return directive
    return classify_dialogue(line)
