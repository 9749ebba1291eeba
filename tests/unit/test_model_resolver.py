"""Tests for model identifier resolution."""

import pytest

from cli_bridge.conversion.model_resolver import (
    DEFAULT_MODEL_TIER,
    MODEL_MAP,
    extract_model,
    strip_provider_prefix,
)
from cli_bridge.models.invocation import ModelTier


@pytest.mark.unit
class TestExtractModel:
    @pytest.mark.parametrize(
        "model, expected",
        [
            ("opus", ModelTier.OPUS),
            ("sonnet", ModelTier.SONNET),
            ("haiku", ModelTier.HAIKU),
            ("claude-opus-4", ModelTier.OPUS),
            ("claude-sonnet-4", ModelTier.SONNET),
            ("claude-haiku-4", ModelTier.HAIKU),
            ("claude-code-cli/claude-opus-4", ModelTier.OPUS),
            ("claude-code-cli/claude-sonnet-4", ModelTier.SONNET),
            ("claude-code-cli/claude-haiku-4", ModelTier.HAIKU),
        ],
    )
    def test_known_identifiers(self, model, expected):
        assert extract_model(model) is expected

    def test_prefixed_bare_alias_resolves_after_stripping(self):
        assert extract_model("claude-code-cli/haiku") is ModelTier.HAIKU

    @pytest.mark.parametrize(
        "model",
        ["gpt-4", "", "Sonnet", "claude-3-5-sonnet", "claude-code-cli/", "other/claude-haiku-4"],
    )
    def test_unknown_identifiers_fall_back_to_opus(self, model):
        assert extract_model(model) is ModelTier.OPUS

    def test_double_prefix_resolves_to_prefixed_entry(self):
        assert extract_model("claude-code-cli/claude-code-cli/claude-haiku-4") is ModelTier.HAIKU

    def test_prefix_is_stripped_only_once(self):
        assert extract_model("claude-code-cli/claude-code-cli/haiku") is ModelTier.OPUS

    @pytest.mark.parametrize("model", [None, 42, ["sonnet"]])
    def test_non_string_input_falls_back(self, model):
        assert extract_model(model) is DEFAULT_MODEL_TIER

    def test_bare_alias_is_idempotent(self):
        tier = extract_model("sonnet")
        assert extract_model(tier.value) is tier

    def test_tier_compares_equal_to_plain_string(self):
        assert extract_model("claude-sonnet-4") == "sonnet"


@pytest.mark.unit
class TestModelMap:
    def test_every_entry_maps_to_a_tier(self):
        assert set(MODEL_MAP.values()) == set(ModelTier)
        assert len(MODEL_MAP) == 9

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            MODEL_MAP["gpt-4"] = ModelTier.HAIKU  # type: ignore[index]


@pytest.mark.unit
def test_strip_provider_prefix():
    assert strip_provider_prefix("claude-code-cli/claude-opus-4") == "claude-opus-4"
    assert strip_provider_prefix("claude-opus-4") == "claude-opus-4"
    assert strip_provider_prefix("x/claude-code-cli/opus") == "x/claude-code-cli/opus"
