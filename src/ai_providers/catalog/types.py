"""Provider registry types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ProviderId(StrEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    DEEPSEEK = "deepseek"
    PERPLEXITY = "perplexity"
    MINIMAX = "minimax"
    GLM = "glm"


class WireProtocol(StrEnum):
    """Request/response shape a provider speaks."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


@dataclass(frozen=True)
class ModelInfo:
    """Static metadata about a model."""

    id: str
    """API identifier (e.g., "deepseek-chat")."""

    provider: ProviderId
    """Registry key of the provider that serves this model."""

    display_name: str
    """Human-readable name."""

    context_window: int
    """Max total tokens (input + output)."""

    max_output: int
    """Max output tokens."""

    input_cost_per_million: float
    """USD per 1M input tokens."""

    output_cost_per_million: float
    """USD per 1M output tokens."""

    cache_hit_cost_per_million: float | None = None
    """USD per 1M input tokens served from the provider's prompt cache."""

    supports_vision: bool = False
    """Whether the model accepts image inputs."""

    supports_reasoning: bool = False
    """Whether the model performs extended reasoning."""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Model id must be a non-empty string")
        if self.context_window <= 0:
            raise ValueError(f"{self.id}: context_window must be positive")
        if self.max_output <= 0:
            raise ValueError(f"{self.id}: max_output must be positive")
        if self.max_output > self.context_window:
            raise ValueError(f"{self.id}: max_output exceeds context_window")
        prices = (
            self.input_cost_per_million,
            self.output_cost_per_million,
            self.cache_hit_cost_per_million,
        )
        if any(p is not None and p < 0 for p in prices):
            raise ValueError(f"{self.id}: prices must be non-negative")

    @property
    def max_input_tokens(self) -> int:
        """Tokens left for the prompt once the output reservation is taken."""
        return self.context_window - self.max_output


@dataclass(frozen=True)
class ProviderConfig:
    """Connection parameters and model list for one vendor."""

    id: ProviderId
    name: str
    base_url: str
    api_key_env_var: str
    default_model: str
    models: tuple[ModelInfo, ...]
    openai_compatible: bool = True
    supports_vision: bool = False
    supports_web_search: bool = False

    def __post_init__(self) -> None:
        if not self.models:
            raise ValueError(f"{self.id}: provider must list at least one model")
        for model in self.models:
            if model.provider != self.id:
                raise ValueError(
                    f"{self.id}: model {model.id} is registered to {model.provider}"
                )
        if self.default_model not in self.model_ids:
            raise ValueError(
                f"{self.id}: default model {self.default_model} is not in its model list"
            )

    @property
    def wire_protocol(self) -> WireProtocol:
        return WireProtocol.OPENAI if self.openai_compatible else WireProtocol.ANTHROPIC

    @property
    def model_ids(self) -> tuple[str, ...]:
        return tuple(m.id for m in self.models)

    @property
    def supports_reasoning(self) -> bool:
        """True if any of the provider's models reasons."""
        return any(m.supports_reasoning for m in self.models)

    def get_model(self, model_id: str) -> ModelInfo | None:
        for model in self.models:
            if model.id == model_id:
                return model
        return None


@dataclass(frozen=True)
class PriceRow:
    """One row of the cross-provider price comparison."""

    provider: str
    model: str
    input_price: float
    output_price: float
    cache_price: float | None = None
