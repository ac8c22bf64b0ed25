"""Provider registry: connection parameters, model limits and pricing."""
from __future__ import annotations

from ai_providers.catalog.types import (
    ModelInfo,
    PriceRow,
    ProviderConfig,
    ProviderId,
    WireProtocol,
)
from ai_providers.catalog._data import LAST_UPDATED, PROVIDERS


def lookup(provider_id: str) -> ProviderConfig | None:
    """Return the provider registered under *provider_id*, or ``None``.

    Matching is case-insensitive; surrounding whitespace is ignored.
    """
    try:
        key = ProviderId(provider_id.strip().lower())
    except ValueError:
        return None
    return PROVIDERS.get(key)


def list_providers() -> list[ProviderConfig]:
    """Return all providers in registry order."""
    return list(PROVIDERS.values())


def list_models(provider: str | None = None) -> list[ModelInfo]:
    """Return models, optionally filtered by provider.

    Models are returned in registry order. An unknown provider yields an
    empty list.
    """
    if provider is None:
        return [m for p in PROVIDERS.values() for m in p.models]
    config = lookup(provider)
    return list(config.models) if config is not None else []


def get_model_info(model_id: str) -> ModelInfo | None:
    """Look up a model by exact ID across every provider.

    Providers are scanned in registry order and the first match wins.
    Returns ``None`` if no match is found.
    """
    for provider in PROVIDERS.values():
        model = provider.get_model(model_id)
        if model is not None:
            return model
    return None


def get_price_comparison() -> list[PriceRow]:
    """Return one row per model, cheapest input price first.

    The sort is stable, so models with equal input prices keep registry order.
    """
    rows = [
        PriceRow(
            provider=provider.name,
            model=model.display_name,
            input_price=model.input_cost_per_million,
            output_price=model.output_cost_per_million,
            cache_price=model.cache_hit_cost_per_million,
        )
        for provider in PROVIDERS.values()
        for model in provider.models
    ]
    return sorted(rows, key=lambda row: row.input_price)


__all__ = [
    "LAST_UPDATED",
    "ModelInfo",
    "PROVIDERS",
    "PriceRow",
    "ProviderConfig",
    "ProviderId",
    "WireProtocol",
    "get_model_info",
    "get_price_comparison",
    "list_models",
    "list_providers",
    "lookup",
]
