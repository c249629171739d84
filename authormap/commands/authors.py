"""Author commands: authors list, authors models."""

from __future__ import annotations

import json
from typing import Optional

import click

from authormap.cli_helpers import _build_index, _fail, _load_catalog, catalog_option


def register(cli: click.Group) -> None:
    cli.add_command(authors)


@click.group(invoke_without_command=True)
@catalog_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def authors(ctx: click.Context, catalog_source: Optional[str], as_json: bool) -> None:
    """List model authors and the models attributed to them."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(list_authors, catalog_source=catalog_source, as_json=as_json)


@authors.command("list")
@catalog_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def list_authors(catalog_source: Optional[str] = None, as_json: bool = False) -> None:
    """List all authors in the catalog, sorted by ID."""
    catalog = _load_catalog(catalog_source)
    index = _build_index(catalog)
    all_authors = sorted(catalog.authors().list(), key=lambda a: a.id)

    if as_json:
        rows = []
        for author in all_authors:
            rule = author.attribution
            rows.append(
                {
                    "id": author.id,
                    "name": author.name,
                    "description": author.description,
                    "mode": rule.mode.value if rule is not None and rule.mode else None,
                    "models": list(index.models_by_author(author.id)),
                }
            )
        click.echo(json.dumps(rows, indent=2))
        return

    if not all_authors:
        click.echo("No authors found in catalog.")
        return

    click.echo(f"Found {len(all_authors)} authors in catalog:\n")
    for author in all_authors:
        click.echo(f"  {author.id} - {author.name or author.id}")
        if author.description:
            click.echo(f"    {author.description}")
        rule = author.attribution
        if rule is not None and rule.mode is not None:
            click.echo(f"    Attribution: {rule.mode.value}")
        attributed = index.models_by_author(author.id)
        if attributed:
            click.echo(f"    Models: {len(attributed)}")
        for label, value in (
            ("Website", author.website),
            ("GitHub", author.github),
            ("HuggingFace", author.huggingface),
            ("Twitter", author.twitter),
        ):
            if value:
                click.echo(f"    {label}: {value}")


@authors.command("models")
@click.argument("author_id")
@catalog_option
def author_models(author_id: str, catalog_source: Optional[str]) -> None:
    """List the models attributed to AUTHOR_ID."""
    catalog = _load_catalog(catalog_source)
    author = catalog.author(author_id)
    if author is None:
        known = ", ".join(sorted(a.id for a in catalog.authors().list()))
        _fail(f"unknown author '{author_id}'\n  Known authors: {known}")

    index = _build_index(catalog)
    model_ids = index.models_by_author(author_id)
    if not model_ids:
        click.echo(f"No models attributed to {author.name or author_id}.")
        return

    click.echo(f"Models developed by {author.name or author_id}:")
    for model_id in model_ids:
        model = catalog.find_model(model_id)
        name = model.name if model is not None and model.name else ""
        click.echo(f"  {model_id:<32s} {name}")
    click.echo(f"\n{len(model_ids)} models.")
