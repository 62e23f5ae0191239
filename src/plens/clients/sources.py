"""Loaders for the static JSON documents that make up the archive."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol
import json
import logging

import httpx

LOGGER = logging.getLogger(__name__)

INTERVENTIONS_FILE = "intervencions.json"
ANNOTATED_FILE = "intervencions_annotated.json"
SESSIONS_FILE = "plenaris.json"
REGIDORS_FILE = "regidors.json"
TAGS_FILE = "tags.json"


class SourceError(RuntimeError):
    """Raised when a source document cannot be read or decoded."""


class DocumentSource(Protocol):
    def read_json(self, name: str) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class RawSources:
    """The five decoded documents, exactly as published upstream."""

    interventions: Any
    annotated: Any
    sessions: Any
    regidors: Any
    tags: Any


class LocalSource:
    """Reads the documents from a directory on disk."""

    def __init__(self, data_dir: Path | str) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def read_json(self, name: str) -> Any:
        path = self._data_dir / name
        try:
            with path.open("r", encoding="utf8") as fh:
                return json.load(fh)
        except OSError as exc:
            raise SourceError(f"Cannot read {path}: {exc}") from exc
        except ValueError as exc:
            raise SourceError(f"{path} is not valid JSON: {exc}") from exc


class HTTPSource:
    """Fetches the documents from a static file server."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._max_retries = max(1, max_retries)
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def read_json(self, name: str) -> Any:
        url = f"{self._base_url}/{name}"
        last_exc: Optional[Exception] = None
        for attempt in range(1, self._max_retries + 1):
            try:
                response = self._client.get(url, headers=self._headers())
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as exc:
                last_exc = exc
                status = exc.response.status_code
                LOGGER.warning(
                    "Source server returned status %s for %s (attempt %s/%s)",
                    status,
                    url,
                    attempt,
                    self._max_retries,
                )
                if status == 404:
                    break
            except httpx.HTTPError as exc:
                last_exc = exc
                LOGGER.warning("HTTP error while requesting %s: %s", url, exc)
            except ValueError as exc:
                raise SourceError(f"{url} did not return valid JSON") from exc
        raise SourceError(f"Failed to fetch {url}") from last_exc

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def __enter__(self) -> "HTTPSource":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()

    @staticmethod
    def _headers() -> Dict[str, str]:
        return {"Accept": "application/json"}


def load_sources(source: DocumentSource) -> RawSources:
    """Read every archive document from ``source``."""

    return RawSources(
        interventions=source.read_json(INTERVENTIONS_FILE),
        annotated=source.read_json(ANNOTATED_FILE),
        sessions=source.read_json(SESSIONS_FILE),
        regidors=source.read_json(REGIDORS_FILE),
        tags=source.read_json(TAGS_FILE),
    )


__all__ = [
    "ANNOTATED_FILE",
    "DocumentSource",
    "HTTPSource",
    "INTERVENTIONS_FILE",
    "LocalSource",
    "REGIDORS_FILE",
    "RawSources",
    "SESSIONS_FILE",
    "SourceError",
    "TAGS_FILE",
    "load_sources",
]
