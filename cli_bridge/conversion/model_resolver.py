"""Model identifier to tier resolution.

Callers may send a bare tier name ("sonnet"), a versioned model name
("claude-sonnet-4") or a provider-qualified name from an upstream router
("claude-code-cli/claude-sonnet-4"). All three resolve to a tier; anything
unknown falls back to DEFAULT_MODEL_TIER instead of failing.
"""

from types import MappingProxyType

from cli_bridge.core.constants import Constants
from cli_bridge.models.invocation import ModelTier

DEFAULT_MODEL_TIER = ModelTier.OPUS

MODEL_MAP: MappingProxyType[str, ModelTier] = MappingProxyType(
    {
        # Versioned model names
        "claude-opus-4": ModelTier.OPUS,
        "claude-sonnet-4": ModelTier.SONNET,
        "claude-haiku-4": ModelTier.HAIKU,
        # Provider-qualified names
        f"{Constants.PROVIDER_PREFIX}claude-opus-4": ModelTier.OPUS,
        f"{Constants.PROVIDER_PREFIX}claude-sonnet-4": ModelTier.SONNET,
        f"{Constants.PROVIDER_PREFIX}claude-haiku-4": ModelTier.HAIKU,
        # Bare tier aliases
        "opus": ModelTier.OPUS,
        "sonnet": ModelTier.SONNET,
        "haiku": ModelTier.HAIKU,
    }
)


def strip_provider_prefix(model: str) -> str:
    """Remove one leading provider namespace, if present."""
    if model.startswith(Constants.PROVIDER_PREFIX):
        return model[len(Constants.PROVIDER_PREFIX) :]
    return model


def extract_model(model: str) -> ModelTier:
    """Resolve a requested model identifier to a tier.

    Args:
        model: The ``model`` field of the incoming request.

    Returns:
        The mapped ModelTier, or DEFAULT_MODEL_TIER when the identifier is
        unknown (or not a string at all).
    """
    if not isinstance(model, str):
        return DEFAULT_MODEL_TIER

    tier = MODEL_MAP.get(model)
    if tier is not None:
        return tier

    tier = MODEL_MAP.get(strip_provider_prefix(model))
    if tier is not None:
        return tier

    return DEFAULT_MODEL_TIER
