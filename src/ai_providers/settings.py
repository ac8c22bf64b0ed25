"""Provider selection from environment variables.

Variables consulted:
    AI_PROVIDER: Registry key, case-insensitive (default: deepseek)
    OPENAI_API_BASE / OPENAI_BASE_URL: Base URL override, checked in that order
    OPENAI_API_KEY: Generic credential for OpenAI-compatible providers
    OPENAI_MODEL: Default model override
    <PROVIDER>_API_KEY: Provider-specific credential, checked first
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from ai_providers import catalog
from ai_providers.catalog import ModelInfo, PriceRow, ProviderConfig, ProviderId, WireProtocol

logger = logging.getLogger(__name__)

FALLBACK_PROVIDER = ProviderId.DEEPSEEK
DEFAULT_MAX_INPUT_TOKENS = 100_000

BASE_URL_OVERRIDE_VARS = ("OPENAI_API_BASE", "OPENAI_BASE_URL")
MODEL_OVERRIDE_VAR = "OPENAI_MODEL"
PROVIDER_VAR = "AI_PROVIDER"

# Fallback credential per wire family when the provider-specific one is unset.
GENERIC_API_KEY_VARS: dict[WireProtocol, str] = {
    WireProtocol.OPENAI: "OPENAI_API_KEY",
    WireProtocol.ANTHROPIC: "ANTHROPIC_API_KEY",
}

_FEATURE_ALIASES = {
    "webSearch": "web_search",
    "web-search": "web_search",
}


class ProviderSettings:
    """Resolves the active provider, endpoint, credential and model.

    Reads from *env* on every call so changes to the mapping are picked up.
    Defaults to ``os.environ``.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = env if env is not None else os.environ

    def _get(self, name: str) -> str:
        return self._env.get(name) or ""

    # -- provider -----------------------------------------------------------

    def current_provider_id(self) -> ProviderId:
        """Return the selected provider, falling back to DeepSeek."""
        requested = self._get(PROVIDER_VAR)
        if not requested:
            return FALLBACK_PROVIDER
        config = catalog.lookup(requested)
        if config is None:
            logger.warning(
                "Unknown %s=%r, falling back to %s",
                PROVIDER_VAR,
                requested,
                FALLBACK_PROVIDER.value,
            )
            return FALLBACK_PROVIDER
        return config.id

    def current_provider(self) -> ProviderConfig:
        return catalog.PROVIDERS[self.current_provider_id()]

    def base_url(self) -> str:
        """Return the explicit override if set, else the provider's base URL."""
        for name in BASE_URL_OVERRIDE_VARS:
            override = self._get(name)
            if override:
                return override
        url = self.current_provider().base_url
        if not url:
            logger.warning("No base URL configured; requests will fail at transport")
        return url

    def api_key(self) -> str:
        """Return the credential for the selected provider.

        Precedence: provider-specific variable, then ``OPENAI_API_KEY``, then
        an empty string.
        """
        provider = self.current_provider()
        key = self._get(provider.api_key_env_var) or self._get("OPENAI_API_KEY")
        if not key:
            logger.warning(
                "No API key found for %s (set %s or OPENAI_API_KEY)",
                provider.id.value,
                provider.api_key_env_var,
            )
        return key

    def api_key_for(self, provider_id: str) -> str:
        """Return the credential for an arbitrary registered provider.

        Falls back to the generic variable of the provider's wire family.
        Unknown providers resolve to an empty string.
        """
        provider = catalog.lookup(provider_id)
        if provider is None:
            return ""
        generic = GENERIC_API_KEY_VARS[provider.wire_protocol]
        key = self._get(provider.api_key_env_var) or self._get(generic)
        if not key:
            logger.warning(
                "No API key found for %s (set %s or %s)",
                provider.id.value,
                provider.api_key_env_var,
                generic,
            )
        return key

    # -- models -------------------------------------------------------------

    def default_model_id(self) -> str:
        return self._get(MODEL_OVERRIDE_VAR) or self.current_provider().default_model

    def model_info(self, model_id: str) -> ModelInfo | None:
        return catalog.get_model_info(model_id)

    def max_input_tokens(self, model_id: str) -> int:
        """Context window minus the output reservation; 100000 if unknown."""
        model = catalog.get_model_info(model_id)
        if model is None:
            return DEFAULT_MAX_INPUT_TOKENS
        return model.max_input_tokens

    def supports_feature(self, feature: str) -> bool:
        """Check ``vision``, ``web_search`` or ``reasoning`` on the provider."""
        provider = self.current_provider()
        feature = _FEATURE_ALIASES.get(feature, feature)
        if feature == "vision":
            return provider.supports_vision
        if feature == "web_search":
            return provider.supports_web_search
        if feature == "reasoning":
            return provider.supports_reasoning
        return False

    def price_comparison(self) -> list[PriceRow]:
        return catalog.get_price_comparison()


# ---------------------------------------------------------------------------
# Module-level functions bound to the process environment
# ---------------------------------------------------------------------------

_default_settings = ProviderSettings()


def current_provider_id() -> ProviderId:
    return _default_settings.current_provider_id()


def current_provider() -> ProviderConfig:
    return _default_settings.current_provider()


def provider_base_url() -> str:
    return _default_settings.base_url()


def provider_api_key() -> str:
    return _default_settings.api_key()


def default_model_id() -> str:
    return _default_settings.default_model_id()


def max_input_tokens(model_id: str) -> int:
    return _default_settings.max_input_tokens(model_id)


def supports_feature(feature: str) -> bool:
    return _default_settings.supports_feature(feature)
