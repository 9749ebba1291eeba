"""Request translation.

- model_resolver: model identifier -> ModelTier
- message_flattener: chat messages -> prompt + system prompt
- openai_to_cli: composes both into an InvocationRequest
"""

from cli_bridge.conversion.message_flattener import extract_text, messages_to_prompt
from cli_bridge.conversion.model_resolver import DEFAULT_MODEL_TIER, MODEL_MAP, extract_model
from cli_bridge.conversion.openai_to_cli import openai_to_cli

__all__ = [
    "DEFAULT_MODEL_TIER",
    "MODEL_MAP",
    "extract_model",
    "extract_text",
    "messages_to_prompt",
    "openai_to_cli",
]
