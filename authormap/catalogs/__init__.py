"""Catalog of model authors, providers, and the models they serve.

Usage::

    from authormap.catalogs import load_catalog

    catalog = load_catalog("~/catalog")
    for author in catalog.authors().list():
        print(author.id, author.attribution)
"""

from ._types import (
    AttributionMode,
    Author,
    AuthorAttribution,
    AuthorCatalog,
    Model,
    Provider,
)
from .catalog import Authors, Catalog, Providers
from .loader import CatalogLoadError, load_catalog

__all__ = [
    "AttributionMode",
    "Author",
    "AuthorAttribution",
    "AuthorCatalog",
    "Authors",
    "Catalog",
    "CatalogLoadError",
    "Model",
    "Provider",
    "Providers",
    "load_catalog",
]
