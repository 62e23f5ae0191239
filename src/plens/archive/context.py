"""Reconciliation of the raw documents into an immutable archive."""
from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple
import logging

from ..clients.sources import RawSources
from ..core.types import AnnotatedSession, Intervention, Regidor, Session, Tag
from ..formatting import derive_session_id
from ..parsing import (
    parse_annotated_sessions,
    parse_interventions,
    parse_regidors,
    parse_sessions,
    parse_tags,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Archive:
    """Read-only view over the reconciled collections.

    Built once by :func:`build_archive` and handed to every query, stats and
    extraction function.
    """

    interventions: Tuple[Intervention, ...]
    sessions: Tuple[Session, ...]
    regidors: Tuple[Regidor, ...]
    tags: Tuple[Tag, ...]
    annotated_sessions: Mapping[str, AnnotatedSession]

    @property
    def annotated_session_ids(self) -> FrozenSet[str]:
        return frozenset(self.annotated_sessions)


def annotated_text_map(annotated_sessions: Mapping[str, AnnotatedSession]) -> Dict[str, str]:
    """Map intervention ids to their annotated text across all sessions."""

    texts: Dict[str, str] = {}
    for session in annotated_sessions.values():
        for item in session.interventions:
            texts[item.id] = item.annotated_text
    return texts


def merge_annotations(
    interventions: Iterable[Intervention], texts: Mapping[str, str]
) -> Tuple[Intervention, ...]:
    merged = []
    for intervention in interventions:
        annotated = texts.get(intervention.id)
        merged.append(replace(intervention, annotated_text=annotated))
    return tuple(merged)


def filter_annotated_sessions(
    sessions: Iterable[Session], annotated_ids: FrozenSet[str]
) -> Tuple[Session, ...]:
    kept = []
    for session in sessions:
        session_id = session.session_id
        if session_id in annotated_ids:
            kept.append(session)
        else:
            LOGGER.debug("Dropping session %s without annotations", session_id)
    return tuple(kept)


def build_archive(raw: RawSources) -> Archive:
    """Parse and cross-reference the raw documents."""

    annotated_sessions = parse_annotated_sessions(raw.annotated)
    texts = annotated_text_map(annotated_sessions)
    interventions = merge_annotations(parse_interventions(raw.interventions), texts)
    all_sessions = parse_sessions(raw.sessions)
    sessions = filter_annotated_sessions(all_sessions, frozenset(annotated_sessions))
    archive = Archive(
        interventions=interventions,
        sessions=sessions,
        regidors=tuple(parse_regidors(raw.regidors)),
        tags=tuple(parse_tags(raw.tags)),
        annotated_sessions=MappingProxyType(annotated_sessions),
    )
    LOGGER.info(
        "Loaded %s interventions (%s annotated), %s of %s sessions, %s regidors, %s tags",
        len(archive.interventions),
        sum(1 for i in archive.interventions if i.annotated_text is not None),
        len(archive.sessions),
        len(all_sessions),
        len(archive.regidors),
        len(archive.tags),
    )
    return archive


__all__ = [
    "Archive",
    "annotated_text_map",
    "build_archive",
    "derive_session_id",
    "filter_annotated_sessions",
    "merge_annotations",
]
