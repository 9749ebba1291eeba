"""OpenAI chat completion request containers.

Only the fields the translation reads are modelled; everything else in the
incoming request is ignored. Schema validation belongs to the API layer, so
``from_dict`` is deliberately lenient and never rejects a request.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """A structured content fragment such as ``{"type": "text", "text": "..."}``."""

    type: str  # noqa: A003
    text: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContentBlock:
        text = data.get("text")
        if text is not None and not isinstance(text, str):
            # Same rule as the flattener: keep truthy values as their string form
            text = str(text) if text else None
        return cls(type=str(data.get("type", "")), text=text)


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """A single chat message.

    ``content`` is a plain string, a tuple of content blocks, or whatever
    the caller sent when it is neither.
    """

    role: str
    content: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChatMessage:
        content = data.get("content")
        if isinstance(content, Sequence) and not isinstance(content, (str, bytes)):
            content = tuple(
                ContentBlock.from_dict(block) if isinstance(block, Mapping) else block
                for block in content
            )
        return cls(role=str(data.get("role", "")), content=content)


@dataclass(frozen=True, slots=True)
class ChatCompletionRequest:
    model: str
    messages: tuple[ChatMessage, ...] = ()
    user: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChatCompletionRequest:
        """Build a request from a decoded JSON object.

        Args:
            data: The raw request body.

        Returns:
            A ChatCompletionRequest. A missing or non-list ``messages``
            becomes an empty tuple and a missing ``model`` becomes an empty
            string.
        """
        raw_messages = data.get("messages")
        if not isinstance(raw_messages, (list, tuple)):
            raw_messages = ()
        messages = tuple(
            msg if isinstance(msg, ChatMessage) else ChatMessage.from_dict(msg)
            for msg in raw_messages
            if isinstance(msg, (ChatMessage, Mapping))
        )
        model = data.get("model")
        return cls(
            model=model if isinstance(model, str) else "",
            messages=messages,
            user=data.get("user"),
        )
