"""SDK client factory - single entry point for model handles.

Usage:
    from ai_providers.factory import get_model
    model = get_model()  # default model of the provider selected by AI_PROVIDER
    reply = model.complete("Summarise this thread ...")

    # Or inject settings directly:
    from ai_providers.factory import ClientFactory
    from ai_providers.settings import ProviderSettings
    factory = ClientFactory(ProviderSettings({"AI_PROVIDER": "glm"}))
    model = factory.get_model("glm-4-air")
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any

from ai_providers import catalog
from ai_providers.catalog import ModelInfo, ProviderConfig, ProviderId, WireProtocol
from ai_providers.config import AdapterTimeout, build_http_client
from ai_providers.errors import UnknownProviderError
from ai_providers.settings import DEFAULT_MAX_INPUT_TOKENS, ProviderSettings
from ai_providers.tokens import truncate_context

logger = logging.getLogger(__name__)

DEFAULT_ANTHROPIC_MAX_TOKENS = 4096


def _close_client(client: Any) -> None:
    if hasattr(client, "close"):
        client.close()


@dataclass(frozen=True)
class ClientHandle:
    """An SDK client together with the provider it talks to."""

    provider: ProviderId
    protocol: WireProtocol
    client: Any
    base_url: str | None = None

    def close(self) -> None:
        """Close the SDK client and the HTTP client it owns."""
        _close_client(self.client)


@dataclass(frozen=True)
class ModelHandle:
    """A model id bound to an SDK client."""

    model: str
    provider: ProviderId
    protocol: WireProtocol
    client: Any

    @property
    def info(self) -> ModelInfo | None:
        return catalog.get_model_info(self.model)

    @property
    def max_input_tokens(self) -> int:
        info = self.info
        return info.max_input_tokens if info else DEFAULT_MAX_INPUT_TOKENS

    def close(self) -> None:
        """Close the bound SDK client.

        Meant for handles from :meth:`ClientFactory.get_model_from_provider`;
        handles from :meth:`ClientFactory.get_model` share the factory's
        client, which :meth:`ClientFactory.close` owns.
        """
        _close_client(self.client)

    def complete(
        self,
        prompt: str,
        *,
        system: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Send a single-turn chat request and return the reply text.

        The prompt is truncated to the model's input budget first.
        """
        prompt = truncate_context(prompt, self.max_input_tokens)
        logger.info(
            "LLM request: provider=%s model=%s", self.provider.value, self.model
        )
        start = time.monotonic()
        if self.protocol is WireProtocol.ANTHROPIC:
            text = self._complete_anthropic(prompt, system, max_tokens)
        else:
            text = self._complete_openai(prompt, system, max_tokens)
        logger.info(
            "LLM response: chars=%d latency=%.2fs", len(text), time.monotonic() - start
        )
        return text

    def _complete_openai(
        self, prompt: str, system: str | None, max_tokens: int | None
    ) -> str:
        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        kwargs: dict[str, Any] = {"model": self.model, "messages": messages}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        response = self.client.chat.completions.create(**kwargs)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def _complete_anthropic(
        self, prompt: str, system: str | None, max_tokens: int | None
    ) -> str:
        if max_tokens is None:
            info = self.info
            max_tokens = info.max_output if info else DEFAULT_ANTHROPIC_MAX_TOKENS
        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        response = self.client.messages.create(**kwargs)
        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )


def create_client_handle(
    provider: ProviderConfig,
    *,
    api_key: str,
    base_url: str | None = None,
    timeout: AdapterTimeout | None = None,
) -> ClientHandle:
    """Construct the vendor SDK client for *provider*.

    Anthropic gets the native SDK; every other provider gets the OpenAI SDK
    pointed at *base_url*. The SDK client owns the :mod:`httpx` client it
    is given; close it through :meth:`ClientHandle.close`.
    """
    kwargs: dict[str, Any] = {}

    # Lazy import SDKs
    if provider.wire_protocol is WireProtocol.ANTHROPIC:
        from anthropic import Anthropic as sdk_class
    else:
        from openai import OpenAI as sdk_class

        if not base_url:
            logger.warning(
                "No base URL for %s; set OPENAI_API_BASE or OPENAI_BASE_URL",
                provider.id.value,
            )
        kwargs["base_url"] = base_url or None

    http_client = build_http_client(timeout)
    try:
        client = sdk_class(api_key=api_key, http_client=http_client, **kwargs)
    except Exception:
        http_client.close()
        raise
    return ClientHandle(
        provider=provider.id,
        protocol=provider.wire_protocol,
        client=client,
        base_url=kwargs.get("base_url"),
    )


class ClientFactory:
    """Builds the SDK client for the selected provider once, on first use."""

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        timeout: AdapterTimeout | None = None,
    ) -> None:
        self._settings = settings or ProviderSettings()
        self._timeout = timeout
        self._handle: ClientHandle | None = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> ProviderSettings:
        return self._settings

    @property
    def initialized(self) -> bool:
        return self._handle is not None

    def get_client(self) -> ClientHandle:
        """Get or create the client handle (lazy initialization)."""
        handle = self._handle
        if handle is not None:
            return handle
        with self._lock:
            if self._handle is None:
                self._handle = self._create_handle()
            return self._handle

    def _create_handle(self) -> ClientHandle:
        provider = self._settings.current_provider()
        if provider.wire_protocol is WireProtocol.ANTHROPIC:
            handle = create_client_handle(
                provider,
                api_key=self._settings.api_key_for(provider.id),
                timeout=self._timeout,
            )
        else:
            handle = create_client_handle(
                provider,
                api_key=self._settings.api_key(),
                base_url=self._settings.base_url(),
                timeout=self._timeout,
            )
        logger.info(
            "Initialized %s client (%s protocol): base_url=%s",
            provider.id.value,
            handle.protocol.value,
            handle.base_url or "<sdk default>",
        )
        return handle

    def close(self) -> None:
        """Close the cached client, if one was built.

        The handle stays cached; the factory is not usable afterwards.
        """
        with self._lock:
            handle = self._handle
        if handle is not None:
            handle.close()

    def get_llm_provider(self) -> Any:
        """Return the raw SDK client for advanced usage."""
        return self.get_client().client

    def get_model(self, name: str | None = None) -> ModelHandle:
        """Return a handle for *name*, or the default model, on the cached client."""
        handle = self.get_client()
        return ModelHandle(
            model=name or self._settings.default_model_id(),
            provider=handle.provider,
            protocol=handle.protocol,
            client=handle.client,
        )

    def get_responses_model(self) -> ModelHandle:
        return self.get_model()

    def get_model_from_provider(
        self, provider_id: str, model_name: str | None = None
    ) -> ModelHandle:
        """Build an ad-hoc client for another provider, bypassing the cache.

        Raises:
            UnknownProviderError: If *provider_id* is not registered.
        """
        provider = catalog.lookup(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id)
        handle = create_client_handle(
            provider,
            api_key=self._settings.api_key_for(provider.id),
            base_url=provider.base_url,
            timeout=self._timeout,
        )
        return ModelHandle(
            model=model_name or provider.default_model,
            provider=handle.provider,
            protocol=handle.protocol,
            client=handle.client,
        )


# ---------------------------------------------------------------------------
# Module-level default factory
# ---------------------------------------------------------------------------

_default_factory: ClientFactory | None = None
_default_lock = threading.Lock()


def set_default_factory(factory: ClientFactory) -> None:
    """Set the module-level default factory."""
    global _default_factory
    with _default_lock:
        _default_factory = factory


def get_default_factory() -> ClientFactory:
    """Get the module-level default factory, creating it if needed."""
    global _default_factory
    if _default_factory is None:
        with _default_lock:
            if _default_factory is None:
                _default_factory = ClientFactory()
    return _default_factory


def get_model(name: str | None = None) -> ModelHandle:
    return get_default_factory().get_model(name)


def get_responses_model() -> ModelHandle:
    return get_default_factory().get_responses_model()


def get_llm_provider() -> Any:
    return get_default_factory().get_llm_provider()


def get_model_from_provider(provider_id: str, model_name: str | None = None) -> ModelHandle:
    return get_default_factory().get_model_from_provider(provider_id, model_name)
