"""Summary metrics for a single translation, used for optional logging."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from cli_bridge.conversion.message_flattener import role_and_content
from cli_bridge.models.chat import ChatCompletionRequest
from cli_bridge.models.invocation import InvocationRequest


@dataclass(frozen=True)
class TranslationMetrics:
    requested_model: str
    resolved_model: str
    message_count: int
    role_counts: dict[str, int] = field(default_factory=dict)
    prompt_chars: int = 0
    system_prompt_chars: int = 0
    has_session: bool = False


def collect_translation_metrics(
    request: ChatCompletionRequest, invocation: InvocationRequest
) -> TranslationMetrics:
    roles = Counter(str(role_and_content(msg)[0]) for msg in request.messages)
    return TranslationMetrics(
        requested_model=request.model,
        resolved_model=invocation.model.value,
        message_count=len(request.messages),
        role_counts=dict(roles),
        prompt_chars=len(invocation.prompt),
        system_prompt_chars=len(invocation.system_prompt or ""),
        has_session=invocation.session_id is not None,
    )


def log_translation_metrics(logger: logging.Logger, metrics: TranslationMetrics) -> None:
    roles = ", ".join(f"{role}={count}" for role, count in sorted(metrics.role_counts.items()))
    logger.info(
        f"TRANSLATE | {metrics.requested_model or '<empty>'} -> {metrics.resolved_model} | "
        f"Messages: {metrics.message_count} ({roles or 'none'}) | "
        f"Prompt: {metrics.prompt_chars:,} chars | "
        f"System: {metrics.system_prompt_chars:,} chars | "
        f"Session: {'yes' if metrics.has_session else 'no'}"
    )
