"""Lookups and grouping over an :class:`~plens.archive.context.Archive`.

All lookups are plain linear scans and return ``None`` or an empty list when
nothing matches.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..core.types import AgendaItemAnnotation, AnnotatedSession, Intervention, Regidor, Session
from .context import Archive

NO_AGENDA_ITEM = "Sense punt"


def interventions_by_session(archive: Archive, session_id: str) -> List[Intervention]:
    return [i for i in archive.interventions if i.session_id == session_id]


def interventions_by_speaker(archive: Archive, name: str) -> List[Intervention]:
    return [i for i in archive.interventions if i.speaker_name == name]


def interventions_by_tag(archive: Archive, code: int) -> List[Intervention]:
    return [i for i in archive.interventions if any(t.code == code for t in i.tags)]


def find_intervention(archive: Archive, intervention_id: str) -> Optional[Intervention]:
    return next((i for i in archive.interventions if i.id == intervention_id), None)


def group_by_agenda_item(items: Iterable[Intervention]) -> Dict[str, List[Intervention]]:
    """Partition ``items`` by agenda item title, keeping first-seen key order."""

    groups: Dict[str, List[Intervention]] = {}
    for item in items:
        key = item.agenda_item_title or NO_AGENDA_ITEM
        groups.setdefault(key, []).append(item)
    return groups


def find_session(archive: Archive, session_id: str) -> Optional[Session]:
    for session in archive.sessions:
        if session.session_id == session_id:
            return session
    return None


def find_regidor(archive: Archive, name: str) -> Optional[Regidor]:
    return next((r for r in archive.regidors if r.name == name), None)


def annotated_session(archive: Archive, session_id: str) -> Optional[AnnotatedSession]:
    return archive.annotated_sessions.get(session_id)


def agenda_annotation(archive: Archive, session_id: str, agenda_title: str) -> Optional[AgendaItemAnnotation]:
    """Return the summary and party positions recorded for one agenda item."""

    session = archive.annotated_sessions.get(session_id)
    if session is None:
        return None
    return next((item for item in session.agenda_items if item.title == agenda_title), None)


__all__ = [
    "NO_AGENDA_ITEM",
    "agenda_annotation",
    "annotated_session",
    "find_intervention",
    "find_regidor",
    "find_session",
    "group_by_agenda_item",
    "interventions_by_session",
    "interventions_by_speaker",
    "interventions_by_tag",
]
