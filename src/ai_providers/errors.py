"""Error hierarchy for the provider configuration layer."""
from __future__ import annotations


class AIProvidersError(Exception):
    """Base error for all ai_providers errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(AIProvidersError):
    """Invalid provider configuration."""


class UnknownProviderError(ConfigurationError):
    """A provider id that is not in the registry was requested."""

    def __init__(self, provider_id: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Unknown provider: {provider_id!r}", cause=cause)
        self.provider_id = provider_id
