"""Parsing helpers for the raw archive documents."""
from __future__ import annotations

from .records import (
    parse_annotated_sessions,
    parse_intervention,
    parse_interventions,
    parse_regidors,
    parse_sessions,
    parse_tags,
)

__all__ = [
    "parse_annotated_sessions",
    "parse_intervention",
    "parse_interventions",
    "parse_regidors",
    "parse_sessions",
    "parse_tags",
]
