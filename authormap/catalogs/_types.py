"""Data classes for authors, providers, and the models they serve.

A provider hosts models behind an API; an author is the organization that
built them. The two are often different, which is what the attribution rule
on each author describes:

- ``provider_id`` only: every model the provider serves belongs to the author
- ``provider_id`` + ``patterns``: only that provider's models matching a pattern
- ``patterns`` only: matching models from any provider
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


class AttributionMode(str, enum.Enum):
    """Which of the three attribution modes a rule uses."""

    PROVIDER_ONLY = "provider"
    SCOPED_PATTERNS = "provider+patterns"
    GLOBAL_PATTERNS = "patterns"


@dataclass(frozen=True)
class Model:
    """A model as served by a provider."""

    id: str
    name: str = ""
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Model:
        return cls(
            id=d["id"],
            name=d.get("name", ""),
            description=d.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass
class Provider:
    """A provider and the models it serves, keyed by model ID."""

    id: str
    name: str = ""
    models: dict[str, Model] = field(default_factory=dict)

    def model_ids(self) -> list[str]:
        return list(self.models.keys())

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Provider:
        raw_models = d.get("models") or []
        # Accept both a list of models and an {id: model} mapping.
        if isinstance(raw_models, dict):
            raw_models = [
                {"id": model_id, **(body or {})} for model_id, body in raw_models.items()
            ]
        models = {}
        for raw in raw_models:
            model = Model.from_dict(raw)
            models[model.id] = model
        return cls(id=d["id"], name=d.get("name", ""), models=models)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "models": [m.to_dict() for m in self.models.values()],
        }


@dataclass(frozen=True)
class AuthorAttribution:
    """How to find an author's models in the catalog."""

    provider_id: Optional[str] = None
    patterns: tuple[str, ...] = ()
    description: Optional[str] = None

    @property
    def has_provider(self) -> bool:
        return bool(self.provider_id)

    @property
    def has_patterns(self) -> bool:
        return len(self.patterns) > 0

    @property
    def mode(self) -> Optional[AttributionMode]:
        """The attribution mode, or None for a rule that matches nothing."""
        if self.has_provider and not self.has_patterns:
            return AttributionMode.PROVIDER_ONLY
        if self.has_provider and self.has_patterns:
            return AttributionMode.SCOPED_PATTERNS
        if self.has_patterns:
            return AttributionMode.GLOBAL_PATTERNS
        return None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AuthorAttribution:
        return cls(
            provider_id=d.get("provider_id") or None,
            patterns=tuple(d.get("patterns") or ()),
            description=d.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.provider_id:
            out["provider_id"] = self.provider_id
        if self.patterns:
            out["patterns"] = list(self.patterns)
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class AuthorCatalog:
    """An author's relationship to the provider catalogs."""

    attribution: Optional[AuthorAttribution] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AuthorCatalog:
        raw = d.get("attribution")
        return cls(
            attribution=AuthorAttribution.from_dict(raw) if raw is not None else None,
            description=d.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.attribution is not None:
            out["attribution"] = self.attribution.to_dict()
        if self.description is not None:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class Author:
    """A known model author or organization."""

    id: str
    name: str = ""
    description: Optional[str] = None
    website: Optional[str] = None
    huggingface: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    catalog: Optional[AuthorCatalog] = None

    @property
    def attribution(self) -> Optional[AuthorAttribution]:
        """The author's attribution rule, or None if it has none."""
        if self.catalog is None:
            return None
        return self.catalog.attribution

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Author:
        raw_catalog = d.get("catalog")
        return cls(
            id=d["id"],
            name=d.get("name", ""),
            description=d.get("description"),
            website=d.get("website"),
            huggingface=d.get("huggingface"),
            github=d.get("github"),
            twitter=d.get("twitter"),
            catalog=AuthorCatalog.from_dict(raw_catalog) if raw_catalog is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        for key in ("description", "website", "huggingface", "github", "twitter"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.catalog is not None:
            out["catalog"] = self.catalog.to_dict()
        return out
