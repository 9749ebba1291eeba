"""Invocation records handed to the process launcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ModelTier(str, Enum):
    """Model capability classes understood by the command-line tool."""

    OPUS = "opus"
    SONNET = "sonnet"
    HAIKU = "haiku"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class FlattenedPrompt:
    prompt: str
    system_prompt: str | None = None


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """Parameters for one single-turn run of the command-line tool.

    Attributes:
        prompt: The flattened conversation, passed as the primary input.
        system_prompt: Caller-supplied system instructions, or None when the
            request carried no system message at all.
        model: The resolved model tier.
        session_id: Opaque caller correlation token copied from ``user``.
    """

    prompt: str
    system_prompt: str | None
    model: ModelTier
    session_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase output contract, omitting absent values."""
        out: dict[str, Any] = {"prompt": self.prompt, "model": self.model.value}
        if self.system_prompt is not None:
            out["systemPrompt"] = self.system_prompt
        if self.session_id is not None:
            out["sessionId"] = self.session_id
        return out
