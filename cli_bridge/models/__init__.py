from cli_bridge.models.chat import ChatCompletionRequest, ChatMessage, ContentBlock
from cli_bridge.models.invocation import FlattenedPrompt, InvocationRequest, ModelTier

__all__ = [
    "ChatCompletionRequest",
    "ChatMessage",
    "ContentBlock",
    "FlattenedPrompt",
    "InvocationRequest",
    "ModelTier",
]
