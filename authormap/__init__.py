"""
authormap: model-to-author attribution across AI providers.

A provider serves models; an author builds them. Authors describe their
models with an attribution rule (a provider, glob patterns, or both) and
:func:`authormap.attribution.new` resolves every rule into an immutable
lookup table.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .attribution import AttributionIndex, PatternCompilationError, new
from .catalogs import (
    AttributionMode,
    Author,
    AuthorAttribution,
    AuthorCatalog,
    Catalog,
    CatalogLoadError,
    Model,
    Provider,
    load_catalog,
)
from .matcher import GlobMatcher, InvalidPatternError, MultiMatcher, compile_glob

__all__ = [
    "AttributionIndex",
    "AttributionMode",
    "Author",
    "AuthorAttribution",
    "AuthorCatalog",
    "Catalog",
    "CatalogLoadError",
    "GlobMatcher",
    "InvalidPatternError",
    "Model",
    "MultiMatcher",
    "PatternCompilationError",
    "Provider",
    "compile_glob",
    "load_catalog",
    "new",
]
