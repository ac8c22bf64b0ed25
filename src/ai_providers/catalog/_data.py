"""Built-in provider registry. Prices are USD per 1M tokens, December 2025."""
from __future__ import annotations

from types import MappingProxyType

from ai_providers.catalog.types import ModelInfo, ProviderConfig, ProviderId

LAST_UPDATED = "2025-12"

_OPENAI = ProviderConfig(
    id=ProviderId.OPENAI,
    name="OpenAI",
    base_url="https://api.openai.com/v1",
    api_key_env_var="OPENAI_API_KEY",
    default_model="gpt-4o",
    openai_compatible=True,
    supports_vision=True,
    supports_web_search=False,
    models=(
        ModelInfo(
            id="gpt-5",
            provider=ProviderId.OPENAI,
            display_name="GPT-5",
            context_window=128_000,
            max_output=16_384,
            input_cost_per_million=0.625,
            output_cost_per_million=5.0,
            supports_vision=True,
        ),
        ModelInfo(
            id="gpt-4o",
            provider=ProviderId.OPENAI,
            display_name="GPT-4o",
            context_window=128_000,
            max_output=16_384,
            input_cost_per_million=1.25,
            output_cost_per_million=5.0,
            supports_vision=True,
        ),
        ModelInfo(
            id="gpt-4o-mini",
            provider=ProviderId.OPENAI,
            display_name="GPT-4o Mini",
            context_window=128_000,
            max_output=16_384,
            input_cost_per_million=0.15,
            output_cost_per_million=0.6,
            supports_vision=True,
        ),
        ModelInfo(
            id="o3",
            provider=ProviderId.OPENAI,
            display_name="o3 (Reasoning)",
            context_window=200_000,
            max_output=100_000,
            input_cost_per_million=1.0,
            output_cost_per_million=4.0,
            supports_reasoning=True,
        ),
        ModelInfo(
            id="o3-pro",
            provider=ProviderId.OPENAI,
            display_name="o3-pro (Reasoning)",
            context_window=200_000,
            max_output=100_000,
            input_cost_per_million=10.0,
            output_cost_per_million=40.0,
            supports_reasoning=True,
        ),
        ModelInfo(
            id="o1",
            provider=ProviderId.OPENAI,
            display_name="o1 (Reasoning)",
            context_window=200_000,
            max_output=100_000,
            input_cost_per_million=7.5,
            output_cost_per_million=30.0,
            supports_reasoning=True,
        ),
        ModelInfo(
            id="o1-pro",
            provider=ProviderId.OPENAI,
            display_name="o1-pro (Reasoning)",
            context_window=200_000,
            max_output=100_000,
            input_cost_per_million=75.0,
            output_cost_per_million=300.0,
            supports_reasoning=True,
        ),
    ),
)

_ANTHROPIC = ProviderConfig(
    id=ProviderId.ANTHROPIC,
    name="Anthropic (Claude)",
    base_url="https://api.anthropic.com/v1",
    api_key_env_var="ANTHROPIC_API_KEY",
    default_model="claude-sonnet-4-5-20251101",
    openai_compatible=False,
    supports_vision=True,
    supports_web_search=False,
    models=(
        ModelInfo(
            id="claude-opus-4-5-20251101",
            provider=ProviderId.ANTHROPIC,
            display_name="Claude Opus 4.5",
            context_window=200_000,
            max_output=32_000,
            input_cost_per_million=5.0,
            output_cost_per_million=25.0,
            supports_vision=True,
        ),
        ModelInfo(
            id="claude-sonnet-4-5-20251101",
            provider=ProviderId.ANTHROPIC,
            display_name="Claude Sonnet 4.5",
            context_window=200_000,
            max_output=16_000,
            input_cost_per_million=3.0,
            output_cost_per_million=15.0,
            supports_vision=True,
        ),
        ModelInfo(
            id="claude-sonnet-4-20250514",
            provider=ProviderId.ANTHROPIC,
            display_name="Claude Sonnet 4",
            context_window=200_000,
            max_output=16_000,
            input_cost_per_million=3.0,
            output_cost_per_million=15.0,
            supports_vision=True,
        ),
        ModelInfo(
            id="claude-3-5-haiku-20241022",
            provider=ProviderId.ANTHROPIC,
            display_name="Claude 3.5 Haiku",
            context_window=200_000,
            max_output=8_192,
            input_cost_per_million=0.8,
            output_cost_per_million=4.0,
            supports_vision=True,
        ),
    ),
)

_DEEPSEEK = ProviderConfig(
    id=ProviderId.DEEPSEEK,
    name="DeepSeek",
    base_url="https://api.deepseek.com/v1",
    api_key_env_var="DEEPSEEK_API_KEY",
    default_model="deepseek-chat",
    openai_compatible=True,
    supports_vision=False,
    supports_web_search=False,
    models=(
        ModelInfo(
            id="deepseek-chat",
            provider=ProviderId.DEEPSEEK,
            display_name="DeepSeek V3.2 (Chat)",
            context_window=128_000,
            max_output=8_192,
            input_cost_per_million=0.28,
            output_cost_per_million=0.42,
            cache_hit_cost_per_million=0.028,
        ),
        ModelInfo(
            id="deepseek-reasoner",
            provider=ProviderId.DEEPSEEK,
            display_name="DeepSeek V3.2 (Reasoner)",
            context_window=128_000,
            max_output=64_000,
            input_cost_per_million=0.28,
            output_cost_per_million=0.42,
            cache_hit_cost_per_million=0.028,
            supports_reasoning=True,
        ),
    ),
)

_PERPLEXITY = ProviderConfig(
    id=ProviderId.PERPLEXITY,
    name="Perplexity",
    base_url="https://api.perplexity.ai",
    api_key_env_var="PERPLEXITY_API_KEY",
    default_model="sonar-pro",
    openai_compatible=True,
    supports_vision=False,
    supports_web_search=True,
    models=(
        ModelInfo(
            id="sonar",
            provider=ProviderId.PERPLEXITY,
            display_name="Sonar",
            context_window=127_000,
            max_output=8_192,
            input_cost_per_million=1.0,
            output_cost_per_million=1.0,
        ),
        ModelInfo(
            id="sonar-pro",
            provider=ProviderId.PERPLEXITY,
            display_name="Sonar Pro",
            context_window=200_000,
            max_output=8_192,
            input_cost_per_million=3.0,
            output_cost_per_million=15.0,
        ),
        # Search, citation and reasoning tokens are billed on top.
        ModelInfo(
            id="sonar-deep-research",
            provider=ProviderId.PERPLEXITY,
            display_name="Deep Research",
            context_window=127_000,
            max_output=8_192,
            input_cost_per_million=2.0,
            output_cost_per_million=8.0,
            supports_reasoning=True,
        ),
    ),
)

_MINIMAX = ProviderConfig(
    id=ProviderId.MINIMAX,
    name="MiniMax",
    base_url="https://api.minimax.chat/v1",
    api_key_env_var="MINIMAX_API_KEY",
    default_model="abab7-chat-preview",
    openai_compatible=True,
    supports_vision=True,
    supports_web_search=True,
    models=(
        ModelInfo(
            id="abab7-chat-preview",
            provider=ProviderId.MINIMAX,
            display_name="MiniMax M2",
            context_window=1_000_000,
            max_output=32_000,
            input_cost_per_million=0.15,
            output_cost_per_million=0.6,
        ),
        ModelInfo(
            id="abab7",
            provider=ProviderId.MINIMAX,
            display_name="MiniMax abab7",
            context_window=1_000_000,
            max_output=32_000,
            input_cost_per_million=0.15,
            output_cost_per_million=0.6,
            supports_vision=True,
        ),
    ),
)

_GLM = ProviderConfig(
    id=ProviderId.GLM,
    name="GLM (Zhipu AI)",
    base_url="https://open.bigmodel.cn/api/paas/v4",
    api_key_env_var="GLM_API_KEY",
    default_model="glm-4-plus",
    openai_compatible=True,
    supports_vision=True,
    supports_web_search=True,
    models=(
        ModelInfo(
            id="glm-4-plus",
            provider=ProviderId.GLM,
            display_name="GLM-4.7 (Plus)",
            context_window=128_000,
            max_output=4_096,
            input_cost_per_million=0.6,
            output_cost_per_million=2.2,
            cache_hit_cost_per_million=0.11,
        ),
        ModelInfo(
            id="glm-4-5x",
            provider=ProviderId.GLM,
            display_name="GLM-4.5-X",
            context_window=128_000,
            max_output=4_096,
            input_cost_per_million=2.2,
            output_cost_per_million=8.9,
            supports_vision=True,
        ),
        ModelInfo(
            id="glm-4-air",
            provider=ProviderId.GLM,
            display_name="GLM-4.5-Air",
            context_window=128_000,
            max_output=4_096,
            input_cost_per_million=0.2,
            output_cost_per_million=1.1,
        ),
        ModelInfo(
            id="glm-4v-plus",
            provider=ProviderId.GLM,
            display_name="GLM-4V Plus (Vision)",
            context_window=8_000,
            max_output=4_096,
            input_cost_per_million=0.6,
            output_cost_per_million=2.2,
            supports_vision=True,
        ),
    ),
)

PROVIDERS: MappingProxyType[ProviderId, ProviderConfig] = MappingProxyType(
    {p.id: p for p in (_OPENAI, _ANTHROPIC, _DEEPSEEK, _PERPLEXITY, _MINIMAX, _GLM)}
)
