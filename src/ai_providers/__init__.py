"""AI providers: registry, selection and SDK clients for hosted LLM vendors."""
from __future__ import annotations

# Catalog
from ai_providers.catalog import (
    LAST_UPDATED,
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

# Errors
from ai_providers.errors import AIProvidersError, ConfigurationError, UnknownProviderError

# Selection
from ai_providers.settings import (
    DEFAULT_MAX_INPUT_TOKENS,
    ProviderSettings,
    current_provider,
    current_provider_id,
    default_model_id,
    max_input_tokens,
    provider_api_key,
    provider_base_url,
    supports_feature,
)

# Token budget
from ai_providers.tokens import TRUNCATION_MARKER, estimate_tokens, truncate_context

# Clients
from ai_providers.config import AdapterTimeout
from ai_providers.factory import (
    ClientFactory,
    ClientHandle,
    ModelHandle,
    get_default_factory,
    get_llm_provider,
    get_model,
    get_model_from_provider,
    get_responses_model,
    set_default_factory,
)

__all__ = [
    # Catalog
    "LAST_UPDATED",
    "PROVIDERS",
    "ModelInfo",
    "PriceRow",
    "ProviderConfig",
    "ProviderId",
    "WireProtocol",
    "get_model_info",
    "get_price_comparison",
    "list_models",
    "list_providers",
    "lookup",
    # Errors
    "AIProvidersError",
    "ConfigurationError",
    "UnknownProviderError",
    # Selection
    "DEFAULT_MAX_INPUT_TOKENS",
    "ProviderSettings",
    "current_provider",
    "current_provider_id",
    "default_model_id",
    "max_input_tokens",
    "provider_api_key",
    "provider_base_url",
    "supports_feature",
    # Token budget
    "TRUNCATION_MARKER",
    "estimate_tokens",
    "truncate_context",
    # Clients
    "AdapterTimeout",
    "ClientFactory",
    "ClientHandle",
    "ModelHandle",
    "get_default_factory",
    "get_llm_provider",
    "get_model",
    "get_model_from_provider",
    "get_responses_model",
    "set_default_factory",
]
