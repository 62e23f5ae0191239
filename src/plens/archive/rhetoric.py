"""Rhetoric markup: tag vocabulary, safe HTML rendering and fragment extraction.

Annotated texts carry inline markup such as ``<fr-dada>...</fr-dada>``. Only
the four tags of :class:`RhetoricTag` are recognised; anything else is treated
as literal text.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional
import html
import re

from ..core.types import Intervention, RhetoricFragment
from .context import Archive
from .queries import group_by_agenda_item, interventions_by_session


class RhetoricTag(Enum):
    """Closed set of rhetoric tags with their display metadata."""

    PROPOSTA = ("fr-proposta", "Proposta", "#2E7D32", "🟢")
    IDEOLOGIA = ("fr-ideologia", "Ideologia", "#6A1B9A", "🟣")
    DADA = ("fr-dada", "Dada", "#1565C0", "🔵")
    ATAC = ("fr-atac", "Atac", "#C62828", "🔴")

    def __init__(self, markup: str, label: str, color: str, emoji: str) -> None:
        self.markup = markup
        self.label = label
        self.color = color
        self.emoji = emoji

    @property
    def layer(self) -> str:
        return "rhetoric"

    @property
    def pattern(self) -> re.Pattern[str]:
        return _PATTERNS[self]

    @classmethod
    def from_markup(cls, markup: str) -> Optional["RhetoricTag"]:
        return next((tag for tag in cls if tag.markup == markup), None)


_PATTERNS = {
    tag: re.compile(rf"<{tag.markup}>(.*?)</{tag.markup}>", re.DOTALL) for tag in RhetoricTag
}


def render_annotated_text(text: Optional[str]) -> str:
    """Escape ``text`` and turn the known rhetoric tags into styled spans."""

    if not text:
        return ""
    rendered = html.escape(text, quote=False)
    for tag in RhetoricTag:
        opening = (
            f'<span class="rh rh--{tag.markup}" data-rh-layer="{tag.layer}" '
            f'data-rh-tag="{tag.markup}" title="{tag.emoji} {tag.label}">'
        )
        rendered = rendered.replace(f"&lt;{tag.markup}&gt;", opening)
        rendered = rendered.replace(f"&lt;/{tag.markup}&gt;", "</span>")
    return rendered


def intervention_anchor(archive: Archive, intervention: Intervention) -> str:
    """Return the ``int-<n>`` anchor of ``intervention`` on its session page.

    Positions follow the agenda grouping used when rendering the session.
    """

    grouped = group_by_agenda_item(interventions_by_session(archive, intervention.session_id))
    index = 0
    for items in grouped.values():
        for item in items:
            if item is intervention or (
                item.start_seconds == intervention.start_seconds
                and item.speaker_name == intervention.speaker_name
                and item.session_id == intervention.session_id
            ):
                return f"int-{index}"
            index += 1
    return "int-0"


def fragments_for(archive: Archive, intervention: Intervention) -> List[RhetoricFragment]:
    """Extract the tagged fragments of one intervention, tag by tag."""

    if not intervention.annotated_text:
        return []
    link = f"/sessions/{intervention.session_id}/#{intervention_anchor(archive, intervention)}"
    fragments: List[RhetoricFragment] = []
    for tag in RhetoricTag:
        for match in tag.pattern.finditer(intervention.annotated_text):
            fragments.append(
                RhetoricFragment(
                    tag=tag.markup,
                    label=tag.label,
                    emoji=tag.emoji,
                    color=tag.color,
                    text=match.group(1).strip(),
                    speaker_name=intervention.speaker_name,
                    speaker_party=intervention.speaker_party,
                    session_id=intervention.session_id,
                    session_date=intervention.session_date,
                    session_title=intervention.session_title,
                    intervention_anchor=link,
                    topics=intervention.tags,
                )
            )
    return fragments


def extract_rhetoric_fragments(archive: Archive) -> List[RhetoricFragment]:
    fragments: List[RhetoricFragment] = []
    for intervention in archive.interventions:
        fragments.extend(fragments_for(archive, intervention))
    return fragments


__all__ = [
    "RhetoricTag",
    "extract_rhetoric_fragments",
    "fragments_for",
    "intervention_anchor",
    "render_annotated_text",
]
