"""Chat message flattening.

The command-line tool runs in single-prompt mode, so a whole conversation has
to be reduced to one prompt string. System messages are kept apart and
returned separately: the tool already carries its own system prompt, and
caller instructions go through a dedicated flag instead of being embedded in
the user input.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from cli_bridge.core.constants import Constants
from cli_bridge.models.chat import ChatMessage, ContentBlock
from cli_bridge.models.invocation import FlattenedPrompt


def _block_text(block: Any) -> str | None:
    """Return the text of a text block, or None for every other block."""
    if isinstance(block, ContentBlock):
        block_type, text = block.type, block.text
    elif isinstance(block, Mapping):
        block_type, text = block.get("type"), block.get("text")
    else:
        return None

    if block_type != Constants.CONTENT_TEXT or not text:
        return None
    return text if isinstance(text, str) else str(text)


def extract_text(content: Any) -> str:
    """Extract text from message content.

    Content may be a plain string or a list of content blocks like
    ``[{"type": "text", "text": "..."}]``. Only non-empty text blocks are kept,
    joined by newlines in their original order. Any other shape is coerced
    with ``str()``.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, (list, tuple)):
        texts = [text for text in map(_block_text, content) if text is not None]
        return "\n".join(texts)
    return str(content)


def wrap_previous_response(text: str) -> str:
    return f"{Constants.PREVIOUS_RESPONSE_OPEN}\n{text}\n{Constants.PREVIOUS_RESPONSE_CLOSE}\n"


def role_and_content(msg: ChatMessage | Mapping[str, Any]) -> tuple[Any, Any]:
    if isinstance(msg, Mapping):
        return msg.get("role"), msg.get("content")
    return getattr(msg, "role", None), getattr(msg, "content", None)


def messages_to_prompt(messages: Iterable[ChatMessage | Mapping[str, Any]]) -> FlattenedPrompt:
    """Convert a chat message sequence into a prompt and a system prompt.

    Args:
        messages: Messages in conversation order.

    Returns:
        A FlattenedPrompt. ``system_prompt`` is None when no system message
        was present, which lets the launcher skip the system prompt flag.
    """
    system_parts: list[str] = []
    prompt_parts: list[str] = []

    for msg in messages:
        role, content = role_and_content(msg)
        text = extract_text(content)

        if role == Constants.ROLE_SYSTEM:
            system_parts.append(text)
        elif role == Constants.ROLE_USER:
            prompt_parts.append(text)
        elif role == Constants.ROLE_ASSISTANT:
            prompt_parts.append(wrap_previous_response(text))
        # Other roles (tool, function, ...) are dropped

    return FlattenedPrompt(
        prompt="\n".join(prompt_parts).strip(),
        system_prompt="\n\n".join(system_parts) if system_parts else None,
    )
