"""In-memory archive: reconciliation, queries, rhetoric extraction and stats."""
from __future__ import annotations

from .context import Archive, build_archive, derive_session_id
from .queries import (
    NO_AGENDA_ITEM,
    agenda_annotation,
    annotated_session,
    find_intervention,
    find_regidor,
    find_session,
    group_by_agenda_item,
    interventions_by_session,
    interventions_by_speaker,
    interventions_by_tag,
)
from .rhetoric import (
    RhetoricTag,
    extract_rhetoric_fragments,
    fragments_for,
    intervention_anchor,
    render_annotated_text,
)
from .stats import regidors_with_stats, sessions_with_stats, tags_with_stats

__all__ = [
    "Archive",
    "NO_AGENDA_ITEM",
    "RhetoricTag",
    "agenda_annotation",
    "annotated_session",
    "build_archive",
    "derive_session_id",
    "extract_rhetoric_fragments",
    "find_intervention",
    "find_regidor",
    "find_session",
    "fragments_for",
    "group_by_agenda_item",
    "intervention_anchor",
    "interventions_by_session",
    "interventions_by_speaker",
    "interventions_by_tag",
    "regidors_with_stats",
    "render_annotated_text",
    "sessions_with_stats",
    "tags_with_stats",
]
