"""OpenAI chat request to CLI invocation conversion."""

from collections.abc import Mapping
from typing import Any

from cli_bridge.conversion.message_flattener import messages_to_prompt
from cli_bridge.conversion.model_resolver import extract_model
from cli_bridge.models.chat import ChatCompletionRequest
from cli_bridge.models.invocation import InvocationRequest


def openai_to_cli(request: ChatCompletionRequest | Mapping[str, Any]) -> InvocationRequest:
    """Convert an OpenAI chat request into CLI invocation parameters.

    Pure mapping: reads no configuration and performs no I/O.

    Args:
        request: A ChatCompletionRequest, or the raw decoded request body.

    Returns:
        The InvocationRequest. ``user`` is carried through untouched as
        ``session_id``; mapping sessions to processes is the launcher's job.
    """
    if not isinstance(request, ChatCompletionRequest):
        request = ChatCompletionRequest.from_dict(request)

    flattened = messages_to_prompt(request.messages)
    return InvocationRequest(
        prompt=flattened.prompt,
        system_prompt=flattened.system_prompt,
        model=extract_model(request.model),
        session_id=request.user,
    )
