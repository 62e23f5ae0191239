from __future__ import annotations

from dataclasses import replace

import pytest

from plens.archive import build_archive, regidors_with_stats, sessions_with_stats, tags_with_stats
from plens.archive.stats import average_polarization, count_rhetoric_tags


def test_average_polarization_rounds_half_up(archive):
    first, second = archive.interventions[0], archive.interventions[1]
    assert average_polarization([first, second]) == 2
    assert average_polarization([]) == 0
    assert average_polarization([replace(first, polarization=2), replace(second, polarization=3)]) == 3
    assert average_polarization([replace(first, polarization=None), replace(second, polarization=0)]) == 0


def test_count_rhetoric_tags_counts_opening_tags_only(archive):
    assert count_rhetoric_tags(archive.interventions) == 3
    assert count_rhetoric_tags([]) == 0


def test_sessions_with_stats(archive):
    stats = {row.session_id: row for row in sessions_with_stats(archive)}

    assert list(stats) == ["2023-02-01_ABC123", "2023-03-15_DEF456"]
    first = stats["2023-02-01_ABC123"]
    assert first.session.title == "Plenari de febrer"
    assert first.intervention_count == 3
    assert first.agenda_item_count == 1
    assert first.avg_polarization == 2
    assert first.has_hate_speech is True
    assert first.rhetoric_tag_count == 3
    assert first.has_agenda_summaries is True

    second = stats["2023-03-15_DEF456"]
    assert second.intervention_count == 1
    assert second.avg_polarization == 2
    assert second.has_hate_speech is False
    assert second.rhetoric_tag_count == 0
    assert second.has_agenda_summaries is False


def test_regidors_sorted_by_intervention_count(archive):
    rows = regidors_with_stats(archive)

    assert [(r.regidor.name, r.intervention_count, r.session_count) for r in rows] == [
        ("Jaume Collboni", 2, 1),
        ("Daniel Sirera", 1, 1),
        ("Janet Sanz", 1, 1),
        ("Elisenda Alamany", 0, 0),
    ]
    assert rows[0].slug == "jaume-collboni"


def test_tags_with_stats(archive):
    rows = tags_with_stats(archive)

    assert [(r.tag.code, r.intervention_count) for r in rows] == [(1, 2), (2, 2), (3, 0)]
    assert rows[0].avg_polarization == pytest.approx(2.0)
    assert rows[1].avg_polarization == pytest.approx(2.5)
    assert rows[2].avg_polarization == 0


def test_tag_average_is_rounded_to_one_decimal(raw_sources):
    interventions = [dict(record) for record in raw_sources.interventions]
    interventions[3]["tags"] = [{"code": 1, "name": "Habitatge"}]
    interventions[3]["polarization"] = 4

    archive = build_archive(replace(raw_sources, interventions=interventions))
    habitatge = next(row for row in tags_with_stats(archive) if row.tag.code == 1)

    assert habitatge.intervention_count == 3
    assert habitatge.avg_polarization == pytest.approx(2.7)


def test_stats_are_idempotent(archive):
    assert sessions_with_stats(archive) == sessions_with_stats(archive)
    assert regidors_with_stats(archive) == regidors_with_stats(archive)
    assert tags_with_stats(archive) == tags_with_stats(archive)


def test_tag_average_rounds_like_the_exact_binary_mean(raw_sources):
    template = raw_sources.interventions[0]
    interventions = [
        dict(template, id=f"t{n}", start_seconds=n, tags=[{"code": 3, "name": "Cultura"}], polarization=1 if n < 17 else 2)
        for n in range(20)
    ]

    archive = build_archive(replace(raw_sources, interventions=interventions))
    cultura = next(row for row in tags_with_stats(archive) if row.tag.code == 3)

    # 23 / 20 is stored as 1.1499..., so it rounds down.
    assert cultura.intervention_count == 20
    assert cultura.avg_polarization == 1.1
