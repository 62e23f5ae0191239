"""Summary statistics for the session, council member and topic listings."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List
import math
import re

from ..core.types import Intervention, RegidorStats, SessionStats, TagStats
from ..formatting import slugify
from .context import Archive
from .queries import (
    annotated_session,
    interventions_by_session,
    interventions_by_speaker,
    interventions_by_tag,
)

_OPENING_TAG = re.compile(r"<fr-[a-z]+>")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _round_tenth(value: float) -> float:
    """Round to one decimal on the exact binary value, so 1.15 (really 1.1499...) gives 1.1."""

    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _mean_polarization(items: Iterable[Intervention]) -> float:
    """Mean of the non-zero polarization values, or ``0.0`` when there are none."""

    values = [i.polarization for i in items if i.polarization]
    if not values:
        return 0.0
    return sum(values) / len(values)


def average_polarization(items: Iterable[Intervention]) -> int:
    return _round_half_up(_mean_polarization(items))


def count_rhetoric_tags(items: Iterable[Intervention]) -> int:
    """Count opening ``<fr-*>`` tags across the annotated texts of ``items``."""

    joined = " ".join(i.annotated_text or "" for i in items)
    return len(_OPENING_TAG.findall(joined))


def sessions_with_stats(archive: Archive) -> List[SessionStats]:
    stats: List[SessionStats] = []
    for session in archive.sessions:
        session_id = session.session_id
        if session_id not in archive.annotated_sessions:
            continue
        items = interventions_by_session(archive, session_id)
        annotated = annotated_session(archive, session_id)
        stats.append(
            SessionStats(
                session=session,
                session_id=session_id,
                intervention_count=len(items),
                agenda_item_count=len({i.agenda_item_title for i in items if i.agenda_item_title}),
                avg_polarization=average_polarization(items),
                has_hate_speech=any(i.hate_speech for i in items),
                rhetoric_tag_count=count_rhetoric_tags(items),
                has_agenda_summaries=bool(
                    annotated and any(item.agenda_summary for item in annotated.agenda_items)
                ),
            )
        )
    return stats


def regidors_with_stats(archive: Archive) -> List[RegidorStats]:
    """Council members ordered by how often they spoke."""

    stats = []
    for regidor in archive.regidors:
        items = interventions_by_speaker(archive, regidor.name)
        stats.append(
            RegidorStats(
                regidor=regidor,
                slug=slugify(regidor.name),
                intervention_count=len(items),
                session_count=len({i.session_id for i in items}),
            )
        )
    return sorted(stats, key=lambda s: s.intervention_count, reverse=True)


def tags_with_stats(archive: Archive) -> List[TagStats]:
    stats = []
    for tag in archive.tags:
        items = interventions_by_tag(archive, tag.code)
        stats.append(
            TagStats(
                tag=tag,
                intervention_count=len(items),
                avg_polarization=_round_tenth(_mean_polarization(items)),
            )
        )
    return sorted(stats, key=lambda s: s.intervention_count, reverse=True)


__all__ = [
    "average_polarization",
    "count_rhetoric_tags",
    "regidors_with_stats",
    "sessions_with_stats",
    "tags_with_stats",
]
