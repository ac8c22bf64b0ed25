"""ai-providers CLI entry point."""
from __future__ import annotations

import logging
from typing import TextIO

import click

from ai_providers import catalog
from ai_providers.settings import ProviderSettings
from ai_providers.tokens import estimate_tokens, truncate_context


def _flag(value: bool) -> str:
    return "yes" if value else "no"


def _price(value: float | None) -> str:
    return "-" if value is None else f"${value:g}"


@click.group()
@click.option("--verbose/--quiet", default=False, help="Log at INFO instead of WARNING")
def cli(verbose: bool) -> None:
    """AI providers: inspect LLM providers, models and prices."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def providers() -> None:
    """List the supported providers."""
    for p in catalog.list_providers():
        click.echo(
            f"{p.id.value:<11} {p.name:<20} default={p.default_model} "
            f"protocol={p.wire_protocol.value} vision={_flag(p.supports_vision)} "
            f"web_search={_flag(p.supports_web_search)} "
            f"reasoning={_flag(p.supports_reasoning)}"
        )


@cli.command()
@click.option("--provider", "provider_id", default=None, help="Only list this provider's models")
def models(provider_id: str | None) -> None:
    """List models with their context and output limits."""
    if provider_id is not None and catalog.lookup(provider_id) is None:
        raise click.ClickException(f"Unknown provider: {provider_id}")
    for m in catalog.list_models(provider_id):
        click.echo(
            f"{m.provider.value:<11} {m.id:<28} context={m.context_window} "
            f"max_output={m.max_output}"
        )


@cli.command()
def prices() -> None:
    """Compare prices per 1M tokens, cheapest input first."""
    click.echo(f"{'PROVIDER':<20} {'MODEL':<26} {'INPUT':>8} {'OUTPUT':>8} {'CACHED':>8}")
    for row in catalog.get_price_comparison():
        click.echo(
            f"{row.provider:<20} {row.model:<26} {_price(row.input_price):>8} "
            f"{_price(row.output_price):>8} {_price(row.cache_price):>8}"
        )


@cli.command()
@click.argument("model_id")
def info(model_id: str) -> None:
    """Show the metadata of a model."""
    model = catalog.get_model_info(model_id)
    if model is None:
        raise click.ClickException(f"Unknown model: {model_id}")
    click.echo(f"id:              {model.id}")
    click.echo(f"name:            {model.display_name}")
    click.echo(f"provider:        {model.provider.value}")
    click.echo(f"context window:  {model.context_window}")
    click.echo(f"max output:      {model.max_output}")
    click.echo(f"max input:       {model.max_input_tokens}")
    click.echo(f"input price:     {_price(model.input_cost_per_million)}")
    click.echo(f"output price:    {_price(model.output_cost_per_million)}")
    click.echo(f"cache price:     {_price(model.cache_hit_cost_per_million)}")
    click.echo(f"vision:          {_flag(model.supports_vision)}")
    click.echo(f"reasoning:       {_flag(model.supports_reasoning)}")


@cli.command()
def current() -> None:
    """Show the provider selected by the environment."""
    settings = ProviderSettings()
    provider = settings.current_provider()
    if provider.openai_compatible:
        has_key = bool(settings.api_key())
        base_url = settings.base_url()
    else:
        has_key = bool(settings.api_key_for(provider.id))
        base_url = provider.base_url
    click.echo(f"provider: {provider.id.value} ({provider.name})")
    click.echo(f"base url: {base_url}")
    click.echo(f"model:    {settings.default_model_id()}")
    click.echo(f"api key:  {'set' if has_key else 'missing'}")


@cli.command()
@click.option("--max-tokens", type=int, default=None, help="Token budget (default: current model's input budget)")
@click.argument("source", type=click.File("r"), default="-")
def truncate(max_tokens: int | None, source: TextIO) -> None:
    """Truncate SOURCE (a file, or - for stdin) to fit the token budget."""
    text = source.read()
    result = truncate_context(text, max_tokens)
    click.echo(result, nl=False)
    logging.getLogger(__name__).info(
        "Estimated tokens: %d -> %d", estimate_tokens(text), estimate_tokens(result)
    )
