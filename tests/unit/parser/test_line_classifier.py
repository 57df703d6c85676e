"""Unit tests for scenario line classification."""

import pytest

from vnscript.parser import (
    DialogueLine,
    Directive,
    DirectiveKind,
    classify_dialogue,
    classify_directive,
    classify_line,
    is_skippable,
    split_script_lines,
)


class TestClassifyDirective:
    """Test cases for directive classification."""

    @pytest.mark.parametrize(
        ("line", "kind", "value"),
        [
            (
                "【背景】夕暮れの坂道。遠くに広島港と瀬戸内海が見える。",
                DirectiveKind.BACKGROUND,
                "夕暮れの坂道。遠くに広島港と瀬戸内海が見える。",
            ),
            (
                "【BGM】静かで、どこか懐かしいピアノ曲",
                DirectiveKind.BGM,
                "静かで、どこか懐かしいピアノ曲",
            ),
            (
                "【SE】遠くで船の汽笛が鳴る音、ヒグラシの声",
                DirectiveKind.SE,
                "遠くで船の汽笛が鳴る音、ヒグラシの声",
            ),
            (
                "【立ち絵】ななたう（ステンドグラスの中にいるように、少し光に透けている）",
                DirectiveKind.CHARACTER,
                "ななたう（ステンドグラスの中にいるように、少し光に透けている）",
            ),
        ],
    )
    def test_recognizes_each_tag(self, line, kind, value):
        """Each tag yields its kind and the trimmed payload."""
        assert classify_directive(line) == Directive(kind=kind, value=value)

    def test_strips_surrounding_whitespace(self):
        """Whitespace around the line and after the tag is removed."""
        result = classify_directive("  【背景】   教室  ")
        assert result == Directive(kind=DirectiveKind.BACKGROUND, value="教室")

    def test_tag_removed_only_once(self):
        """A tag repeated inside the payload is kept."""
        result = classify_directive("【背景】【背景】の看板")
        assert result.value == "【背景】の看板"

    def test_nested_brackets_in_value(self):
        """Bracket characters inside the payload are preserved."""
        result = classify_directive("【SE】【ドアの音】（小さく）")
        assert result.kind is DirectiveKind.SE
        assert result.value == "【ドアの音】（小さく）"

    def test_empty_payload(self):
        """A bare tag is still a directive with an empty value."""
        assert classify_directive("【BGM】") == Directive(DirectiveKind.BGM, "")

    def test_plain_text_is_not_directive(self):
        """Lines without a tag are not directives."""
        assert classify_directive("普通のテキスト") is None

    def test_mid_line_tag_is_not_directive(self):
        """A tag that does not start the line does not count."""
        assert classify_directive("ここで【背景】が変わる") is None

    def test_empty_line(self):
        """Empty lines are not directives."""
        assert classify_directive("") is None


class TestClassifyDialogue:
    """Test cases for dialogue classification."""

    def test_character_header(self):
        """A bare name is a speaker header."""
        assert classify_dialogue("主人公") == DialogueLine(
            character="主人公", text="", is_monologue=False
        )
        assert classify_dialogue("主人公").is_header
        assert not classify_dialogue("「こんにちは」").is_header

    def test_character_header_with_trailing_whitespace(self):
        """Trailing whitespace does not break header detection."""
        assert classify_dialogue("ななたう   ") == DialogueLine("ななたう", "", False)

    @pytest.mark.parametrize("name", ["主人公", "ななたう", "先生", "A"])
    def test_monologue_header(self, name):
        """The monologue marker names the character and marks monologue."""
        assert classify_dialogue(f"{name}（モノローグ）") == DialogueLine(
            character=name, text="", is_monologue=True
        )

    def test_quoted_dialogue(self):
        """Quote brackets are stripped once from each end."""
        assert classify_dialogue("「……やっと会えたね」") == DialogueLine(
            character="", text="……やっと会えたね", is_monologue=False
        )

    def test_quoted_dialogue_keeps_inner_brackets(self):
        """Only the outermost brackets are removed."""
        result = classify_dialogue("「「本当に？」って聞いたの」")
        assert result.text == "「本当に？」って聞いたの"

    @pytest.mark.parametrize("line", ["「」", "  「」  "])
    def test_empty_quote_is_narration(self, line):
        """Quoted dialogue needs inner text; a bare pair is narration."""
        assert classify_dialogue(line) == DialogueLine("", "「」", True)

    def test_single_character_quote(self):
        result = classify_dialogue("「あ」")
        assert result == DialogueLine("", "あ", False)
        assert result.character == ""

    def test_prose_is_monologue(self):
        """Plain prose is narration attributed to nobody."""
        line = "夏の終わりの、生温い風が頬を撫でる。"
        assert classify_dialogue(line) == DialogueLine(
            character="", text=line, is_monologue=True
        )

    def test_multi_word_prose(self):
        """Whitespace-separated prose is narration, not a header."""
        result = classify_dialogue("The wind was warm")
        assert result == DialogueLine("", "The wind was warm", True)

    def test_parenthesized_token_is_not_header(self):
        """A token with parentheses falls through to narration."""
        result = classify_dialogue("ななたう（笑顔）")
        assert result.character == ""
        assert result.is_monologue is True

    def test_unknown_tag_is_prose(self):
        """Tags outside the directive set are narration, not headers."""
        result = classify_dialogue("【表情】笑顔")
        assert result == DialogueLine("", "【表情】笑顔", True)

    @pytest.mark.parametrize(
        "line",
        ["", "   ", "---", "----------", "タイトル：テスト", "章：第一章"],
    )
    def test_skippable_lines(self, line):
        """Structural lines carry no dialogue."""
        assert classify_dialogue(line) is None

    def test_directive_line_is_not_dialogue(self):
        """Directive lines are left to directive classification."""
        assert classify_dialogue("【背景】夕暮れの坂道") is None

    @pytest.mark.parametrize(
        "line",
        ["あ", "……", "「", "（モノローグ）", "abc def", "1. 選ぶ", "。"],
    )
    def test_never_unrecognized(self, line):
        """Every non-skippable, non-directive line classifies."""
        assert classify_dialogue(line) is not None


class TestClassifyLine:
    """Test cases for combined classification."""

    def test_directive_first(self):
        result = classify_line("【BGM】テストBGM")
        assert isinstance(result, Directive)

    def test_dialogue_fallback(self):
        result = classify_line("「こんにちは」")
        assert isinstance(result, DialogueLine)
        assert result.text == "こんにちは"

    def test_skippable(self):
        assert classify_line("---") is None
        assert is_skippable("  ")
        assert not is_skippable("主人公")


class TestSplitScriptLines:
    """Test cases for split_script_lines."""

    def test_splits_on_line_feed_only(self):
        assert split_script_lines("a\u2028b\nc\x0cd\ne\x85f") == [
            "a\u2028b",
            "c\x0cd",
            "e\x85f",
        ]

    def test_removes_carriage_returns(self):
        assert split_script_lines("a\r\nb\r\n") == ["a", "b"]

    def test_final_line_feed(self):
        assert split_script_lines("a\n") == ["a"]
        assert split_script_lines("a\n\n") == ["a", ""]

    def test_empty_text(self):
        assert split_script_lines("") == []
