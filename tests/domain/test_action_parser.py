"""Tests for domain/action_parser.py — pure Python, no provider dependency."""

from actionscribe.domain.action_parser import (
    NO_ACTIONS,
    build_extraction_prompt,
    is_no_actions,
    parse_action_lines,
)


class TestParseActionLines:
    def test_no_actions_sentinel(self):
        assert parse_action_lines("NO_ACTIONS") == []

    def test_sentinel_with_whitespace(self):
        assert parse_action_lines("  NO_ACTIONS\n") == []

    def test_blank_lines_dropped(self):
        assert parse_action_lines("Buy milk\n\nCall Bob") == ["Buy milk", "Call Bob"]

    def test_lines_trimmed_in_order(self):
        assert parse_action_lines("  Write report \n\tEmail team\n") == [
            "Write report",
            "Email team",
        ]

    def test_empty_response(self):
        assert parse_action_lines("") == []

    def test_sentinel_inside_list_is_just_text(self):
        assert parse_action_lines("Buy milk\nNO_ACTIONS") == ["Buy milk", "NO_ACTIONS"]


class TestIsNoActions:
    def test_exact(self):
        assert is_no_actions(NO_ACTIONS) is True

    def test_other(self):
        assert is_no_actions("Buy milk") is False


class TestBuildExtractionPrompt:
    def test_embeds_text_verbatim(self):
        text = "need to renew passport\n  ask Ana about the budget"
        prompt = build_extraction_prompt(text)
        assert text in prompt

    def test_mentions_instructions_and_sentinel(self):
        prompt = build_extraction_prompt("x")
        assert "Explicit tasks" in prompt
        assert "Implied tasks" in prompt
        assert "Break down complex tasks" in prompt
        assert '"NO_ACTIONS"' in prompt
        assert "Each action should be on a new line" in prompt
