"""Conversion of the raw JSON documents into typed records.

Upstream producers own the document formats, so every parser here is lenient:
missing or mistyped fields fall back to an empty default instead of failing.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from ..core.types import (
    AgendaItemAnnotation,
    AnnotatedIntervention,
    AnnotatedSession,
    Document,
    Intervention,
    Regidor,
    Session,
    Tag,
    TopicRef,
)

LOGGER = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _parse_bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    return bool(value)


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {str(key): _text(item) for key, item in value.items() if item is not None}


def _records(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


def _parse_topics(value: Any) -> Tuple[TopicRef, ...]:
    topics: List[TopicRef] = []
    for entry in _records(value):
        code = _parse_int(entry.get("code"))
        if code is None:
            continue
        topics.append(TopicRef(code=code, name=_text(entry.get("name"))))
    return tuple(topics)


def parse_intervention(data: Mapping[str, Any]) -> Optional[Intervention]:
    """Build an :class:`Intervention` from a raw record, or ``None`` without an id."""

    raw_identifier = data.get("id")
    if raw_identifier in (None, ""):
        return None
    annotated = data.get("annotated_text")
    return Intervention(
        id=str(raw_identifier),
        session_id=_text(data.get("session_id")),
        session_date=_text(data.get("session_date")),
        session_title=_text(data.get("session_title")),
        speaker_code=_text(data.get("speaker_code")),
        speaker_name=_text(data.get("speaker_name")),
        speaker_party=_text(data.get("speaker_party")),
        speaker_role=_text(data.get("speaker_role")),
        text=_text(data.get("text")),
        annotated_text=annotated if isinstance(annotated, str) else None,
        start_time=_text(data.get("start_time")),
        start_seconds=_parse_float(data.get("start_seconds")),
        end_seconds=_parse_float(data.get("end_seconds")),
        duration=_parse_float(data.get("duration")),
        agenda_item_number=_optional_text(data.get("agenda_item_number")),
        agenda_item_title=_optional_text(data.get("agenda_item_title")),
        tags=_parse_topics(data.get("tags")),
        polarization=_parse_int(data.get("polarization")),
        hate_speech=_parse_bool(data.get("hate_speech")),
        from_agenda=bool(data.get("from_agenda")),
        source=dict(data),
    )


def parse_interventions(document: Any) -> List[Intervention]:
    interventions: List[Intervention] = []
    for index, entry in enumerate(_records(document)):
        intervention = parse_intervention(entry)
        if intervention is None:
            LOGGER.warning("Skipping intervention record %s without an id", index)
            continue
        interventions.append(intervention)
    return interventions


def parse_session(data: Mapping[str, Any]) -> Session:
    documents = tuple(
        Document(name=_text(entry.get("name")), url=_text(entry.get("url")))
        for entry in _records(data.get("documents"))
    )
    return Session(
        title=_text(data.get("title")),
        date=_text(data.get("date")),
        video_url=_text(data.get("video_url")),
        documents=documents,
    )


def parse_sessions(document: Any) -> List[Session]:
    return [parse_session(entry) for entry in _records(document)]


def parse_annotated_session(session_id: str, data: Mapping[str, Any]) -> AnnotatedSession:
    agenda_items = tuple(
        AgendaItemAnnotation(
            title=_text(entry.get("title")),
            agenda_summary=_text(entry.get("agenda_summary")),
            party_positions=_string_map(entry.get("party_positions")),
        )
        for entry in _records(data.get("agenda_items"))
    )
    interventions: List[AnnotatedIntervention] = []
    for entry in _records(data.get("interventions")):
        identifier = entry.get("id")
        if identifier in (None, ""):
            LOGGER.warning("Skipping annotated intervention without an id in session %s", session_id)
            continue
        interventions.append(
            AnnotatedIntervention(id=str(identifier), annotated_text=_text(entry.get("annotated_text")))
        )
    return AnnotatedSession(
        session_id=_text(data.get("session_id")) or session_id,
        session_title=_text(data.get("session_title")),
        session_date=_text(data.get("session_date")),
        agenda_items=agenda_items,
        interventions=tuple(interventions),
    )


def parse_annotated_sessions(document: Any) -> Dict[str, AnnotatedSession]:
    """Parse ``{"sessions": {id: ...}}`` keeping the document's key order."""

    if not isinstance(document, Mapping):
        return {}
    sessions = document.get("sessions")
    if not isinstance(sessions, Mapping):
        return {}
    return {
        str(key): parse_annotated_session(str(key), value)
        for key, value in sessions.items()
        if isinstance(value, Mapping)
    }


def parse_regidor(data: Mapping[str, Any]) -> Regidor:
    return Regidor(
        name=_text(data.get("name")),
        party=_text(data.get("party")),
        party_logo=_text(data.get("party_logo")),
        photo=_text(data.get("photo")),
        salary=_optional_text(data.get("salary")),
        dedication=_text(data.get("dedication")),
        email=_optional_text(data.get("email")),
        social_media=_string_map(data.get("social_media")),
        links=_string_map(data.get("links")),
        last_update=_text(data.get("last_update")),
    )


def parse_regidors(document: Any) -> List[Regidor]:
    if isinstance(document, Mapping):
        document = document.get("regidors")
    return [parse_regidor(entry) for entry in _records(document)]


def parse_tags(document: Any) -> List[Tag]:
    tags: List[Tag] = []
    for entry in _records(document):
        code = _parse_int(entry.get("code"))
        if code is None:
            LOGGER.warning("Skipping tag %r without a numeric code", entry.get("name"))
            continue
        tags.append(Tag(code=code, name=_text(entry.get("name")), description=_text(entry.get("description"))))
    return tags


__all__ = [
    "parse_annotated_session",
    "parse_annotated_sessions",
    "parse_intervention",
    "parse_interventions",
    "parse_regidor",
    "parse_regidors",
    "parse_session",
    "parse_sessions",
    "parse_tags",
]
