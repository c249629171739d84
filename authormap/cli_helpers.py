"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, Optional

import click

from authormap.attribution import AttributionIndex, PatternCompilationError, new
from authormap.catalogs import Catalog, CatalogLoadError, load_catalog
from authormap.config import CATALOG_ENV_VAR, get_catalog_source

_logger = logging.getLogger(__name__)

catalog_option = click.option(
    "--catalog",
    "-c",
    "catalog_source",
    default=None,
    help=f"Catalog directory, JSON file, or URL. Defaults to ${CATALOG_ENV_VAR} or ~/.authormap/config.json.",
)


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_catalog(catalog_source: Optional[str]) -> Catalog:
    source = catalog_source or get_catalog_source()
    if not source:
        _fail(
            "no catalog configured.\n"
            f"  Pass --catalog <dir|file|url> or set {CATALOG_ENV_VAR}."
        )
    try:
        return load_catalog(source)
    except CatalogLoadError as exc:
        _fail(str(exc))


def _build_index(catalog: Catalog) -> AttributionIndex:
    try:
        return new(catalog)
    except PatternCompilationError as exc:
        _logger.debug("Attribution failed", exc_info=True)
        _fail(f"{exc}\n  Fix the patterns of author '{exc.author_id}' in the catalog.")


def _author_names(catalog: Catalog, author_ids: tuple[str, ...]) -> str:
    names = []
    for author_id in author_ids:
        author = catalog.author(author_id)
        names.append(author.name if author is not None and author.name else author_id)
    return ", ".join(names)
