"""Model-to-author attribution across providers.

Each author may carry an attribution rule in one of three modes:

1. Provider-only: every model served by ``provider_id`` belongs to the author
2. Provider + patterns: only that provider's models matching a pattern
3. Global patterns: matching models from every provider

The full model ID -> authors table is computed once by :func:`new`; the
returned :class:`AttributionIndex` is immutable and safe to share across
threads without locking.

Usage::

    from authormap.attribution import new

    index = new(catalog)
    authors, found = index.attribute("llama-3-8b")
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from authormap.catalogs import AttributionMode, Author, Provider
from authormap.matcher import InvalidPatternError, MultiMatcher

logger = logging.getLogger(__name__)


class PatternCompilationError(ValueError):
    """Raised when an author's attribution pattern is not valid glob syntax."""

    def __init__(self, author_id: str, pattern: str, reason: str) -> None:
        self.author_id = author_id
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"invalid attribution pattern {pattern!r} for author '{author_id}': {reason}"
        )


class AttributionIndex:
    """Resolved model ID -> author IDs table.

    Built by :func:`new`. Author IDs for a model are distinct and kept in
    the order they were discovered.
    """

    __slots__ = ("_by_model", "_by_author")

    def __init__(self, by_model: dict[str, tuple[str, ...]]) -> None:
        self._by_model = {m: tuple(a) for m, a in by_model.items() if a}
        by_author: dict[str, list[str]] = {}
        for model_id, author_ids in self._by_model.items():
            for author_id in author_ids:
                by_author.setdefault(author_id, []).append(model_id)
        self._by_author = {a: tuple(m) for a, m in by_author.items()}

    @classmethod
    def build(cls, catalog: Any) -> AttributionIndex:
        return new(catalog)

    def attribute(self, model_id: str) -> tuple[tuple[str, ...], bool]:
        """Return the authors of a model and whether any were found."""
        authors = self._by_model.get(model_id)
        if not authors:
            return (), False
        return authors, True

    def models_by_author(self, author_id: str) -> tuple[str, ...]:
        """Model IDs attributed to an author, in discovery order."""
        return self._by_author.get(author_id, ())

    def authors(self) -> tuple[str, ...]:
        """Author IDs that claim at least one model."""
        return tuple(self._by_author)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._by_model

    def __len__(self) -> int:
        return len(self._by_model)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._by_model))

    def __repr__(self) -> str:
        return f"AttributionIndex(models={len(self._by_model)}, authors={len(self._by_author)})"


def _compile_rules(authors: list[Author]) -> dict[str, MultiMatcher]:
    """Compile the patterns of every author that has any, keyed by author ID."""
    compiled: dict[str, MultiMatcher] = {}
    for author in authors:
        rule = author.attribution
        if rule is None or not rule.has_patterns:
            continue
        try:
            compiled[author.id] = MultiMatcher(rule.patterns, case_insensitive=True)
        except InvalidPatternError as exc:
            raise PatternCompilationError(author.id, exc.pattern, exc.reason) from exc
    return compiled


def _resolve_rule(
    author: Author,
    matcher: Optional[MultiMatcher],
    providers: list[Provider],
    providers_by_id: dict[str, Provider],
) -> Iterator[str]:
    """Yield the model IDs one author's rule claims."""
    rule = author.attribution
    mode = rule.mode if rule is not None else None
    if mode is None:
        return

    if mode is AttributionMode.GLOBAL_PATTERNS:
        assert matcher is not None
        for provider in providers:
            for model_id in provider.models:
                if matcher.match(model_id):
                    yield model_id
        return

    provider = providers_by_id.get(rule.provider_id)
    if provider is None:
        logger.debug(
            "Author %s references unknown provider %s, skipping",
            author.id, rule.provider_id,
        )
        return

    for model_id in provider.models:
        if mode is AttributionMode.PROVIDER_ONLY or matcher.match(model_id):
            yield model_id


def new(catalog: Any) -> AttributionIndex:
    """Resolve every author's attribution rule against the catalog.

    ``catalog`` must expose ``authors().list()`` and ``providers().list()``;
    it is only read. Authors without a rule are skipped, as are rules that
    name a provider missing from the catalog.

    Raises
    ------
    PatternCompilationError
        If any author has an invalid glob pattern. No index is built.
    """
    authors = catalog.authors().list()
    providers = catalog.providers().list()

    providers_by_id: dict[str, Provider] = {}
    for provider in providers:
        providers_by_id.setdefault(provider.id, provider)

    matchers = _compile_rules(authors)

    table: dict[str, list[str]] = {}
    seen: set[tuple[str, str]] = set()
    for author in authors:
        for model_id in _resolve_rule(author, matchers.get(author.id), providers, providers_by_id):
            if (model_id, author.id) in seen:
                continue
            seen.add((model_id, author.id))
            table.setdefault(model_id, []).append(author.id)

    index = AttributionIndex({m: tuple(a) for m, a in table.items()})
    logger.debug(
        "Attributed %d models to %d authors (%d authors in catalog)",
        len(index), len(index.authors()), len(authors),
    )
    return index
