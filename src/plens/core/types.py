"""Typed domain objects for the plenary archive."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..formatting import derive_session_id


@dataclass(frozen=True, slots=True)
class TopicRef:
    """Topic tag reference attached to an intervention."""

    code: int
    name: str


@dataclass(frozen=True, slots=True)
class Intervention:
    """A single speaking turn within a plenary session."""

    id: str
    session_id: str
    speaker_name: str
    text: str
    session_date: str = ""
    session_title: str = ""
    speaker_code: str = ""
    speaker_party: str = ""
    speaker_role: str = ""
    annotated_text: Optional[str] = None
    start_time: str = ""
    start_seconds: float = 0.0
    end_seconds: float = 0.0
    duration: float = 0.0
    agenda_item_number: Optional[str] = None
    agenda_item_title: Optional[str] = None
    tags: Tuple[TopicRef, ...] = ()
    polarization: Optional[int] = None
    hate_speech: Optional[bool] = None
    from_agenda: bool = False
    source: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Document:
    name: str
    url: str


@dataclass(frozen=True, slots=True)
class Session:
    """Metadata of a recorded plenary meeting."""

    title: str
    date: str
    video_url: str
    documents: Tuple[Document, ...] = ()

    @property
    def session_id(self) -> str:
        return derive_session_id(self.date, self.video_url)


@dataclass(frozen=True, slots=True)
class AgendaItemAnnotation:
    title: str
    agenda_summary: str = ""
    party_positions: Dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True, slots=True)
class AnnotatedIntervention:
    id: str
    annotated_text: str


@dataclass(frozen=True, slots=True)
class AnnotatedSession:
    """Annotation overlay for one session: agenda summaries and tagged texts."""

    session_id: str
    session_title: str = ""
    session_date: str = ""
    agenda_items: Tuple[AgendaItemAnnotation, ...] = ()
    interventions: Tuple[AnnotatedIntervention, ...] = ()


@dataclass(frozen=True, slots=True)
class Regidor:
    """Council member with contact and social metadata."""

    name: str
    party: str = ""
    party_logo: str = ""
    photo: str = ""
    salary: Optional[str] = None
    dedication: str = ""
    email: Optional[str] = None
    social_media: Dict[str, str] = field(default_factory=dict, compare=False)
    links: Dict[str, str] = field(default_factory=dict, compare=False)
    last_update: str = ""


@dataclass(frozen=True, slots=True)
class Tag:
    code: int
    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class RhetoricFragment:
    """A tagged excerpt of an intervention with its speaker and session context."""

    tag: str
    label: str
    emoji: str
    color: str
    text: str
    speaker_name: str
    speaker_party: str
    session_id: str
    session_date: str
    session_title: str
    intervention_anchor: str
    topics: Tuple[TopicRef, ...] = ()


@dataclass(frozen=True, slots=True)
class SessionStats:
    """Summary figures for a session listing."""

    session: Session
    session_id: str
    intervention_count: int
    agenda_item_count: int
    avg_polarization: int
    has_hate_speech: bool
    rhetoric_tag_count: int
    has_agenda_summaries: bool


@dataclass(frozen=True, slots=True)
class RegidorStats:
    regidor: Regidor
    slug: str
    intervention_count: int
    session_count: int


@dataclass(frozen=True, slots=True)
class TagStats:
    tag: Tag
    intervention_count: int
    avg_polarization: float


__all__ = [
    "AgendaItemAnnotation",
    "AnnotatedIntervention",
    "AnnotatedSession",
    "Document",
    "Intervention",
    "Regidor",
    "RegidorStats",
    "RhetoricFragment",
    "Session",
    "SessionStats",
    "Tag",
    "TagStats",
    "TopicRef",
]
