from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from plens.archive import Archive, build_archive
from plens.clients.sources import (
    ANNOTATED_FILE,
    INTERVENTIONS_FILE,
    REGIDORS_FILE,
    SESSIONS_FILE,
    TAGS_FILE,
    RawSources,
)

FIRST_SESSION = "2023-02-01_ABC123"
SECOND_SESSION = "2023-03-15_DEF456"


def _intervention(identifier: str, session_id: str, speaker: str, party: str, start: float, **extra: Any) -> Dict[str, Any]:
    record = {
        "id": identifier,
        "session_id": session_id,
        "session_date": session_id[:10],
        "session_title": f"Plenari {session_id[:10]}",
        "speaker_code": speaker.split()[0].upper(),
        "speaker_name": speaker,
        "speaker_party": party,
        "speaker_role": "Regidor/a",
        "text": f"Text de {identifier}",
        "start_time": f"00:00:{int(start):02d}",
        "start_seconds": start,
        "end_seconds": start + 30,
        "duration": 30,
        "from_agenda": True,
    }
    record.update(extra)
    return record


@pytest.fixture()
def raw_documents() -> Dict[str, Any]:
    interventions = [
        _intervention(
            "i1",
            FIRST_SESSION,
            "Jaume Collboni",
            "PSC",
            10,
            agenda_item_number="1",
            agenda_item_title="Pressupost",
            tags=[{"code": 1, "name": "Habitatge"}],
            polarization=1,
        ),
        _intervention(
            "i2",
            FIRST_SESSION,
            "Daniel Sirera",
            "PP",
            50,
            agenda_item_number="1",
            agenda_item_title="Pressupost",
            tags=[{"code": 1, "name": "Habitatge"}, {"code": 2, "name": "Mobilitat"}],
            polarization=3,
            hate_speech=True,
        ),
        _intervention("i3", FIRST_SESSION, "Jaume Collboni", "PSC", 90, from_agenda=False),
        _intervention(
            "i4",
            SECOND_SESSION,
            "Janet Sanz",
            "Barcelona en Comú",
            5,
            agenda_item_title="Mobilitat",
            tags=[{"code": 2, "name": "Mobilitat"}],
            polarization=2,
        ),
    ]
    annotated = {
        "sessions": {
            FIRST_SESSION: {
                "session_id": FIRST_SESSION,
                "session_title": "Plenari de febrer",
                "session_date": "01/02/2023",
                "agenda_items": [
                    {
                        "title": "Pressupost",
                        "agenda_summary": "Debat sobre el pressupost municipal.",
                        "party_positions": {"PSC": "A favor", "PP": "En contra"},
                    }
                ],
                "interventions": [
                    {
                        "id": "i1",
                        "annotated_text": "Proposem <fr-proposta>més habitatge</fr-proposta> amb <fr-dada> 3.000 pisos </fr-dada>.",
                    },
                    {"id": "i2", "annotated_text": "<fr-atac>Vostès han fallat</fr-atac> a la ciutat."},
                ],
            },
            SECOND_SESSION: {
                "session_id": SECOND_SESSION,
                "session_title": "Plenari de març",
                "session_date": "15/03/2023",
                "agenda_items": [{"title": "Mobilitat", "agenda_summary": "", "party_positions": {}}],
                "interventions": [{"id": "i4", "annotated_text": "Sense etiquetes."}],
            },
        }
    }
    sessions = [
        {
            "title": "Plenari de febrer",
            "date": "01/02/2023",
            "video_url": "https://www.youtube.com/embed/ABC123?si=share",
            "documents": [{"name": "Acta", "url": "https://example.invalid/acta.pdf"}],
        },
        {
            "title": "Plenari de març",
            "date": "15/03/2023",
            "video_url": "https://www.youtube.com/embed/DEF456",
            "documents": [],
        },
        {
            "title": "Plenari d'abril",
            "date": "20/04/2023",
            "video_url": "https://www.youtube.com/embed/GHI789",
            "documents": [],
        },
    ]
    regidors = {
        "regidors": [
            {"name": "Jaume Collboni", "party": "PSC", "email": "alcalde@example.invalid", "social_media": {"x": "@jaume"}},
            {"name": "Daniel Sirera", "party": "PP"},
            {"name": "Janet Sanz", "party": "Barcelona en Comú"},
            {"name": "Elisenda Alamany", "party": "ERC"},
        ]
    }
    tags = [
        {"code": 1, "name": "Habitatge", "description": "Accés a l'habitatge"},
        {"code": 2, "name": "Mobilitat", "description": "Transport i mobilitat"},
        {"code": 3, "name": "Cultura", "description": "Equipaments culturals"},
    ]
    return {
        INTERVENTIONS_FILE: interventions,
        ANNOTATED_FILE: annotated,
        SESSIONS_FILE: sessions,
        REGIDORS_FILE: regidors,
        TAGS_FILE: tags,
    }


@pytest.fixture()
def raw_sources(raw_documents) -> RawSources:
    return RawSources(
        interventions=raw_documents[INTERVENTIONS_FILE],
        annotated=raw_documents[ANNOTATED_FILE],
        sessions=raw_documents[SESSIONS_FILE],
        regidors=raw_documents[REGIDORS_FILE],
        tags=raw_documents[TAGS_FILE],
    )


@pytest.fixture()
def archive(raw_sources) -> Archive:
    return build_archive(raw_sources)


@pytest.fixture()
def data_dir(tmp_path, raw_documents) -> Path:
    target = tmp_path / "data"
    target.mkdir()
    for name, document in raw_documents.items():
        (target / name).write_text(json.dumps(document, ensure_ascii=False), encoding="utf8")
    return target
