"""Attribution commands: attribute, models."""

from __future__ import annotations

import sys
from typing import Optional

import click

from authormap.cli_helpers import (
    _author_names,
    _build_index,
    _fail,
    _load_catalog,
    catalog_option,
)


def register(cli: click.Group) -> None:
    cli.add_command(attribute)
    cli.add_command(models)


@click.command()
@click.argument("model_ids", nargs=-1, required=True)
@catalog_option
def attribute(model_ids: tuple[str, ...], catalog_source: Optional[str]) -> None:
    """Show which authors created each MODEL_ID.

    \b
    Examples:
        authormap attribute claude-3-opus
        authormap attribute llama-3-8b mixtral-8x7b --catalog ./catalog
    """
    catalog = _load_catalog(catalog_source)
    index = _build_index(catalog)

    unknown = 0
    for model_id in model_ids:
        author_ids, found = index.attribute(model_id)
        if found:
            click.echo(f"{model_id}: {', '.join(author_ids)}")
        else:
            unknown += 1
            click.echo(f"{model_id}: unknown")
    if unknown:
        sys.exit(1)


@click.command()
@click.option("--provider", "-p", "provider_id", default=None, help="Only list this provider's models.")
@catalog_option
def models(provider_id: Optional[str], catalog_source: Optional[str]) -> None:
    """List catalog models and who developed them."""
    catalog = _load_catalog(catalog_source)
    index = _build_index(catalog)

    if provider_id is not None:
        provider = catalog.provider(provider_id)
        if provider is None:
            _fail(f"unknown provider '{provider_id}'")
        providers = [provider]
    else:
        providers = catalog.providers().list()

    count = 0
    click.echo(f"{'Model':<32s} {'Provider':<14s} {'Developed by'}")
    click.echo("-" * 76)
    for provider in providers:
        for model_id in provider.model_ids():
            author_ids, found = index.attribute(model_id)
            developed_by = _author_names(catalog, author_ids) if found else "-"
            click.echo(f"  {model_id:<30s} {provider.id:<14s} {developed_by}")
            count += 1
    click.echo(f"\n{count} models.")
