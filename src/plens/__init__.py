"""Read-only data access for the Barcelona plenary transcript archive."""
from __future__ import annotations

from .archive import (
    Archive,
    RhetoricTag,
    build_archive,
    derive_session_id,
    extract_rhetoric_fragments,
    group_by_agenda_item,
    intervention_anchor,
    regidors_with_stats,
    render_annotated_text,
    sessions_with_stats,
    tags_with_stats,
)
from .clients import HTTPSource, LocalSource, RawSources, SourceError, load_sources
from .config import AppConfig, LoggingConfig, SourcesConfig, load_config
from .core import Intervention, Regidor, RhetoricFragment, Session, Tag
from .runtime import create_archive

__all__ = [
    "AppConfig",
    "Archive",
    "HTTPSource",
    "Intervention",
    "LocalSource",
    "LoggingConfig",
    "RawSources",
    "Regidor",
    "RhetoricFragment",
    "RhetoricTag",
    "Session",
    "SourceError",
    "SourcesConfig",
    "Tag",
    "build_archive",
    "create_archive",
    "derive_session_id",
    "extract_rhetoric_fragments",
    "group_by_agenda_item",
    "intervention_anchor",
    "load_config",
    "load_sources",
    "regidors_with_stats",
    "render_annotated_text",
    "sessions_with_stats",
    "tags_with_stats",
]
