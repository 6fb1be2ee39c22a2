"""Sample records indexed at startup."""

from __future__ import annotations

from mail_searcher.index import MailIndex
from mail_searcher.models import RawRecord

SEED_RECORDS: tuple[RawRecord, ...] = (
    RawRecord(
        sender="juan@correo.com",
        subject="Reunion de equipo",
        body="Reunion urgente mañana",
        date="2025-11-10",
    ),
    RawRecord(
        sender="ana@correo.com",
        subject="Entrega de tarea",
        body="La tarea esta lista",
        date="2025-11-11",
    ),
    RawRecord(
        sender="luis@correo.com",
        subject="Proyecto nuevo",
        body="Debemos entregar el reporte",
        date="2025-11-09",
    ),
)


def load_seed_records(index: MailIndex) -> int:
    for raw in SEED_RECORDS:
        index.add(raw)
    return len(SEED_RECORDS)
