"""Core domain types."""
from __future__ import annotations

from .types import (
    AgendaItemAnnotation,
    AnnotatedIntervention,
    AnnotatedSession,
    Document,
    Intervention,
    Regidor,
    RegidorStats,
    RhetoricFragment,
    Session,
    SessionStats,
    Tag,
    TagStats,
    TopicRef,
)

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
