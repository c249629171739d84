"""Load a catalog from disk or over HTTP.

Supported sources:

- A directory with ``authors.json`` and/or ``providers.json``
- A single JSON file: ``{"authors": [...], "providers": [...]}``
- An ``http://`` / ``https://`` URL serving the single-file form
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from ._types import Author, Provider
from .catalog import Catalog

logger = logging.getLogger(__name__)

AUTHORS_FILE = "authors.json"
PROVIDERS_FILE = "providers.json"

# Status codes safe to retry (transient server errors + rate limiting).
_RETRYABLE_STATUS_CODES = {502, 503, 504, 429}


class CatalogLoadError(RuntimeError):
    """Raised when a catalog source cannot be read or parsed."""


def http_request(
    method: str,
    url: str,
    *,
    max_retries: int = 3,
    backoff_base: float = 0.5,
    timeout: float = 15.0,
    headers: Optional[dict[str, str]] = None,
    **kwargs: Any,
) -> httpx.Response:
    """HTTP request with automatic retry on transient failures.

    Retries on connection errors, timeouts and 502/503/504/429. Raises
    :class:`CatalogLoadError` once the retries are exhausted on a
    connection failure; any other response is returned to the caller.
    """
    for attempt in range(max_retries):
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                resp = client.request(method, url, headers=headers, **kwargs)

            if resp.status_code in _RETRYABLE_STATUS_CODES and attempt < max_retries - 1:
                wait = backoff_base * (2 ** attempt)
                logger.debug("HTTP %d on %s %s, retrying in %.1fs", resp.status_code, method, url, wait)
                time.sleep(wait)
                continue

            return resp

        except (httpx.ConnectError, httpx.TimeoutException, httpx.RemoteProtocolError) as exc:
            if attempt < max_retries - 1:
                wait = backoff_base * (2 ** attempt)
                logger.debug(
                    "Connection to %s failed (%s), retrying (%d/%d) in %.1fs",
                    url, exc, attempt + 1, max_retries, wait,
                )
                time.sleep(wait)
            else:
                raise CatalogLoadError(
                    f"failed to connect to {url} after {max_retries} attempts: {exc}"
                ) from exc

    raise CatalogLoadError(f"request to {url} failed after {max_retries} attempts")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"invalid JSON in {path}: {exc}") from exc
    except OSError as exc:
        raise CatalogLoadError(f"cannot read {path}: {exc}") from exc


def _items(data: Any, key: str, origin: str) -> list[dict[str, Any]]:
    """Accept either a bare list or ``{key: [...]}``."""
    if isinstance(data, dict):
        data = data.get(key) or []
    if not isinstance(data, list):
        raise CatalogLoadError(f"expected a list of {key} in {origin}")
    return data


def _build(authors: list[dict[str, Any]], providers: list[dict[str, Any]], origin: str) -> Catalog:
    try:
        return Catalog(
            authors=[Author.from_dict(a) for a in authors],
            providers=[Provider.from_dict(p) for p in providers],
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogLoadError(f"malformed catalog entry in {origin}: {exc!r}") from exc


def load_catalog_dir(directory: Path) -> Catalog:
    authors: list[dict[str, Any]] = []
    providers: list[dict[str, Any]] = []
    authors_path = directory / AUTHORS_FILE
    providers_path = directory / PROVIDERS_FILE
    if authors_path.exists():
        authors = _items(_read_json(authors_path), "authors", str(authors_path))
    if providers_path.exists():
        providers = _items(_read_json(providers_path), "providers", str(providers_path))
    if not authors_path.exists() and not providers_path.exists():
        logger.debug("No %s or %s in %s", AUTHORS_FILE, PROVIDERS_FILE, directory)
    return _build(authors, providers, str(directory))


def load_catalog_file(path: Path) -> Catalog:
    data = _read_json(path)
    if not isinstance(data, dict):
        raise CatalogLoadError(f"expected a JSON object in {path}")
    return _build(
        _items(data, "authors", str(path)),
        _items(data, "providers", str(path)),
        str(path),
    )


def load_catalog_url(url: str, *, timeout: float = 15.0) -> Catalog:
    resp = http_request("GET", url, timeout=timeout)
    if resp.status_code >= 400:
        raise CatalogLoadError(f"fetching {url} returned HTTP {resp.status_code}")
    try:
        data = resp.json()
    except ValueError as exc:
        raise CatalogLoadError(f"invalid JSON from {url}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogLoadError(f"expected a JSON object from {url}")
    return _build(_items(data, "authors", url), _items(data, "providers", url), url)


def load_catalog(source: Union[str, Path]) -> Catalog:
    """Load a catalog from a directory, a JSON file, or a URL.

    Raises
    ------
    CatalogLoadError
        If the source does not exist or cannot be read or parsed.
    """
    if isinstance(source, str) and _is_url(source):
        catalog = load_catalog_url(source)
    else:
        path = Path(source).expanduser()
        if path.is_dir():
            catalog = load_catalog_dir(path)
        elif path.is_file():
            catalog = load_catalog_file(path)
        else:
            raise CatalogLoadError(f"catalog source not found: {source}")

    logger.debug(
        "Loaded catalog from %s: %d authors, %d providers",
        source, len(catalog.authors()), len(catalog.providers()),
    )
    return catalog
