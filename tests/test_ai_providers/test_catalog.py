"""Tests for the provider registry."""
from __future__ import annotations

import dataclasses

import pytest

from ai_providers.catalog import (
    PROVIDERS,
    ModelInfo,
    PriceRow,
    ProviderConfig,
    ProviderId,
    WireProtocol,
    get_model_info,
    get_price_comparison,
    list_models,
    list_providers,
    lookup,
)


def _model(**overrides) -> ModelInfo:
    fields = dict(
        id="m",
        provider=ProviderId.OPENAI,
        display_name="M",
        context_window=1000,
        max_output=100,
        input_cost_per_million=1.0,
        output_cost_per_million=2.0,
    )
    fields.update(overrides)
    return ModelInfo(**fields)


# ---------------------------------------------------------------------------
# TestModelInfo
# ---------------------------------------------------------------------------


class TestModelInfo:
    def test_defaults(self) -> None:
        info = _model()
        assert info.cache_hit_cost_per_million is None
        assert info.supports_vision is False
        assert info.supports_reasoning is False

    def test_frozen(self) -> None:
        info = _model()
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.id = "other"  # type: ignore[misc]

    def test_max_input_tokens(self) -> None:
        assert _model(context_window=1000, max_output=100).max_input_tokens == 900

    def test_max_output_may_equal_context_window(self) -> None:
        assert _model(context_window=100, max_output=100).max_input_tokens == 0

    def test_rejects_output_larger_than_context(self) -> None:
        with pytest.raises(ValueError, match="max_output"):
            _model(context_window=100, max_output=101)

    def test_rejects_non_positive_context(self) -> None:
        with pytest.raises(ValueError, match="context_window"):
            _model(context_window=0)

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            _model(cache_hit_cost_per_million=-0.1)

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(ValueError):
            _model(id="")


# ---------------------------------------------------------------------------
# TestProviderConfig
# ---------------------------------------------------------------------------


class TestProviderConfig:
    def _provider(self, **overrides) -> ProviderConfig:
        fields = dict(
            id=ProviderId.OPENAI,
            name="Test",
            base_url="https://example.test/v1",
            api_key_env_var="TEST_API_KEY",
            default_model="m",
            models=(_model(),),
        )
        fields.update(overrides)
        return ProviderConfig(**fields)

    def test_default_model_must_be_listed(self) -> None:
        with pytest.raises(ValueError, match="default model"):
            self._provider(default_model="missing")

    def test_models_must_be_non_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one model"):
            self._provider(models=())

    def test_models_must_belong_to_provider(self) -> None:
        with pytest.raises(ValueError, match="registered to"):
            self._provider(models=(_model(provider=ProviderId.GLM),))

    def test_wire_protocol(self) -> None:
        assert self._provider().wire_protocol is WireProtocol.OPENAI
        assert (
            self._provider(openai_compatible=False).wire_protocol
            is WireProtocol.ANTHROPIC
        )

    def test_get_model(self) -> None:
        provider = self._provider()
        assert provider.get_model("m") is provider.models[0]
        assert provider.get_model("x") is None


# ---------------------------------------------------------------------------
# TestRegistry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_all_providers_registered(self) -> None:
        assert set(PROVIDERS) == set(ProviderId)

    def test_registry_order(self) -> None:
        assert [p.id for p in list_providers()] == [
            ProviderId.OPENAI,
            ProviderId.ANTHROPIC,
            ProviderId.DEEPSEEK,
            ProviderId.PERPLEXITY,
            ProviderId.MINIMAX,
            ProviderId.GLM,
        ]

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PROVIDERS[ProviderId.OPENAI] = PROVIDERS[ProviderId.GLM]  # type: ignore[index]

    @pytest.mark.parametrize("provider_id", list(ProviderId))
    def test_default_model_is_listed(self, provider_id: ProviderId) -> None:
        provider = lookup(provider_id)
        assert provider is not None
        assert provider.default_model in provider.model_ids

    def test_output_never_exceeds_context(self) -> None:
        for model in list_models():
            assert model.max_output <= model.context_window

    def test_model_ids_are_unique(self) -> None:
        ids = [m.id for m in list_models()]
        assert len(ids) == len(set(ids))

    def test_only_anthropic_uses_native_protocol(self) -> None:
        native = [p.id for p in list_providers() if not p.openai_compatible]
        assert native == [ProviderId.ANTHROPIC]


# ---------------------------------------------------------------------------
# TestLookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_exact(self) -> None:
        provider = lookup("deepseek")
        assert provider is not None
        assert provider.id is ProviderId.DEEPSEEK
        assert provider.base_url == "https://api.deepseek.com/v1"
        assert provider.api_key_env_var == "DEEPSEEK_API_KEY"

    def test_case_insensitive(self) -> None:
        provider = lookup("GLM")
        assert provider is not None
        assert provider.id is ProviderId.GLM

    def test_enum_member(self) -> None:
        assert lookup(ProviderId.PERPLEXITY) is PROVIDERS[ProviderId.PERPLEXITY]

    def test_unknown_returns_none(self) -> None:
        assert lookup("nope") is None
        assert lookup("") is None


# ---------------------------------------------------------------------------
# TestGetModelInfo
# ---------------------------------------------------------------------------


class TestGetModelInfo:
    def test_exact_id_match(self) -> None:
        result = get_model_info("deepseek-reasoner")
        assert result is not None
        assert result.provider is ProviderId.DEEPSEEK
        assert result.max_output == 64_000
        assert result.supports_reasoning is True

    def test_cache_price(self) -> None:
        result = get_model_info("glm-4-plus")
        assert result is not None
        assert result.cache_hit_cost_per_million == 0.11

    def test_unknown_returns_none(self) -> None:
        assert get_model_info("nonexistent-model") is None

    def test_case_sensitive(self) -> None:
        assert get_model_info("GPT-4o") is None


# ---------------------------------------------------------------------------
# TestListModels
# ---------------------------------------------------------------------------


class TestListModels:
    def test_all_models_count(self) -> None:
        assert len(list_models()) == 22

    def test_filter_anthropic(self) -> None:
        models = list_models(provider="anthropic")
        assert len(models) == 4
        assert all(m.provider is ProviderId.ANTHROPIC for m in models)

    def test_filter_keeps_order(self) -> None:
        assert [m.id for m in list_models("deepseek")] == [
            "deepseek-chat",
            "deepseek-reasoner",
        ]

    def test_unknown_provider_returns_empty(self) -> None:
        assert list_models(provider="unknown") == []


# ---------------------------------------------------------------------------
# TestPriceComparison
# ---------------------------------------------------------------------------


class TestPriceComparison:
    def test_one_row_per_model(self) -> None:
        assert len(get_price_comparison()) == len(list_models())

    def test_sorted_by_input_price(self) -> None:
        prices = [row.input_price for row in get_price_comparison()]
        assert prices == sorted(prices)

    def test_cheapest_first(self) -> None:
        first = get_price_comparison()[0]
        assert first == PriceRow(
            provider="OpenAI",
            model="GPT-4o Mini",
            input_price=0.15,
            output_price=0.6,
            cache_price=None,
        )

    def test_ties_keep_registry_order(self) -> None:
        cheapest = [
            (row.provider, row.model)
            for row in get_price_comparison()
            if row.input_price == 0.15
        ]
        assert cheapest == [
            ("OpenAI", "GPT-4o Mini"),
            ("MiniMax", "MiniMax M2"),
            ("MiniMax", "MiniMax abab7"),
        ]

    def test_uses_display_names_and_cache_price(self) -> None:
        rows = {row.model: row for row in get_price_comparison()}
        assert rows["DeepSeek V3.2 (Chat)"].provider == "DeepSeek"
        assert rows["DeepSeek V3.2 (Chat)"].cache_price == 0.028
        assert rows["o1-pro (Reasoning)"].cache_price is None
