"""Tests for chat message flattening."""

import pytest

from cli_bridge.conversion.message_flattener import extract_text, messages_to_prompt
from cli_bridge.models.chat import ChatMessage, ContentBlock


@pytest.mark.unit
class TestExtractText:
    def test_plain_string_is_verbatim(self):
        assert extract_text("  keep  spacing \n") == "  keep  spacing \n"

    def test_text_blocks_joined_with_newline(self):
        content = [
            {"type": "text", "text": "a"},
            {"type": "image", "text": "ignored"},
            {"type": "text", "text": "b"},
        ]
        assert extract_text(content) == "a\nb"

    def test_empty_and_missing_text_blocks_are_skipped(self):
        content = [
            {"type": "text", "text": ""},
            {"type": "text"},
            {"type": "text", "text": "only"},
        ]
        assert extract_text(content) == "only"

    def test_content_block_instances(self):
        content = (ContentBlock("text", "x"), ContentBlock("image_url"), ContentBlock("text", "y"))
        assert extract_text(content) == "x\ny"

    def test_non_block_items_are_skipped(self):
        assert extract_text(["stray", {"type": "text", "text": "kept"}, 7]) == "kept"

    def test_empty_list_gives_empty_string(self):
        assert extract_text([]) == ""

    @pytest.mark.parametrize(
        "content, expected",
        [
            (None, "None"),
            (42, "42"),
            ({"type": "text", "text": "x"}, "{'type': 'text', 'text': 'x'}"),
        ],
    )
    def test_other_shapes_are_stringified(self, content, expected):
        assert extract_text(content) == expected


@pytest.mark.unit
class TestMessagesToPrompt:
    def test_conversation_with_previous_response(self):
        result = messages_to_prompt(
            [
                {"role": "user", "content": "hi"},
                {"role": "assistant", "content": "hello"},
                {"role": "user", "content": "more"},
            ]
        )
        assert result.prompt == "hi\n<previous_response>\nhello\n</previous_response>\n\nmore"
        assert result.system_prompt is None

    def test_system_messages_joined_with_blank_line(self):
        result = messages_to_prompt(
            [{"role": "system", "content": "A"}, {"role": "system", "content": "B"}]
        )
        assert result.system_prompt == "A\n\nB"
        assert result.prompt == ""

    def test_system_messages_are_kept_out_of_prompt(self):
        result = messages_to_prompt(
            [
                {"role": "user", "content": "question"},
                {"role": "system", "content": "rules"},
            ]
        )
        assert result.prompt == "question"
        assert result.system_prompt == "rules"

    def test_single_empty_system_message_is_not_absent(self):
        result = messages_to_prompt([{"role": "system", "content": ""}])
        assert result.system_prompt == ""

    def test_trailing_assistant_message_is_trimmed(self):
        result = messages_to_prompt([{"role": "assistant", "content": "done"}])
        assert result.prompt == "<previous_response>\ndone\n</previous_response>"

    def test_outer_whitespace_is_trimmed(self):
        result = messages_to_prompt([{"role": "user", "content": "\n  padded  \n"}])
        assert result.prompt == "padded"

    def test_unknown_roles_are_ignored(self):
        result = messages_to_prompt(
            [
                {"role": "tool", "content": "tool output"},
                {"role": "user", "content": "hi"},
                {"role": "function", "content": "x"},
                {"content": "no role"},
            ]
        )
        assert result.prompt == "hi"
        assert result.system_prompt is None

    def test_empty_sequence(self):
        result = messages_to_prompt([])
        assert result.prompt == ""
        assert result.system_prompt is None

    def test_accepts_chat_message_instances(self):
        messages = (
            ChatMessage("system", (ContentBlock("text", "s1"), ContentBlock("text", "s2"))),
            ChatMessage("user", "u"),
        )
        result = messages_to_prompt(messages)
        assert result.system_prompt == "s1\ns2"
        assert result.prompt == "u"

    def test_accepts_generator(self):
        messages = ({"role": "user", "content": str(i)} for i in range(3))
        assert messages_to_prompt(messages).prompt == "0\n1\n2"
