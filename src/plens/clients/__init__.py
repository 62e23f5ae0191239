"""Document sources for the archive."""
from __future__ import annotations

from .sources import HTTPSource, LocalSource, RawSources, SourceError, load_sources

__all__ = ["HTTPSource", "LocalSource", "RawSources", "SourceError", "load_sources"]
