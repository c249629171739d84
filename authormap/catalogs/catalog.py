"""In-memory catalog of authors and providers.

Collections keep insertion order so that everything reading the catalog
(listing commands, the attribution resolver) sees a stable ordering.
Replacing an entry by ID keeps its original position.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

from ._types import Author, Model, Provider

_T = TypeVar("_T", Author, Provider)


class _Collection(Generic[_T]):
    """Ordered ID -> item mapping with the read operations callers use."""

    kind: str = "item"

    def __init__(self) -> None:
        self._items: dict[str, _T] = {}

    def list(self) -> list[_T]:
        return list(self._items.values())

    def get(self, item_id: str) -> Optional[_T]:
        return self._items.get(item_id)

    def set(self, item: _T) -> None:
        if not item.id:
            raise ValueError(f"{self.kind} ID must not be empty")
        self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[_T]:
        return iter(list(self._items.values()))


class Authors(_Collection[Author]):
    kind = "author"


class Providers(_Collection[Provider]):
    kind = "provider"


class Catalog:
    """Authors and providers, with the listing operations attribution reads."""

    def __init__(
        self,
        authors: Optional[list[Author]] = None,
        providers: Optional[list[Provider]] = None,
    ) -> None:
        self._authors = Authors()
        self._providers = Providers()
        for author in authors or []:
            self.set_author(author)
        for provider in providers or []:
            self.set_provider(provider)

    @classmethod
    def empty(cls) -> Catalog:
        return cls()

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Catalog:
        """Build a catalog from ``{"authors": [...], "providers": [...]}``."""
        return cls(
            authors=[Author.from_dict(a) for a in d.get("authors") or []],
            providers=[Provider.from_dict(p) for p in d.get("providers") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "authors": [a.to_dict() for a in self._authors.list()],
            "providers": [p.to_dict() for p in self._providers.list()],
        }

    def authors(self) -> Authors:
        return self._authors

    def providers(self) -> Providers:
        return self._providers

    def set_author(self, author: Author) -> None:
        self._authors.set(author)

    def set_provider(self, provider: Provider) -> None:
        self._providers.set(provider)

    def author(self, author_id: str) -> Optional[Author]:
        return self._authors.get(author_id)

    def provider(self, provider_id: str) -> Optional[Provider]:
        return self._providers.get(provider_id)

    def models(self) -> list[Model]:
        """Every model of every provider, in provider order.

        The same model ID can appear more than once when several providers
        serve it.
        """
        return [m for p in self._providers.list() for m in p.models.values()]

    def find_model(self, model_id: str) -> Optional[Model]:
        """Return the first model with this ID across all providers."""
        for provider in self._providers.list():
            model = provider.models.get(model_id)
            if model is not None:
                return model
        return None
