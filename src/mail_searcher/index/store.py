"""Identifier-keyed record store.

The store owns the canonical copy of every record and is the only component
that hands out identifiers.
"""

from __future__ import annotations

from collections.abc import Iterator

from mail_searcher.models import MessageRecord


class RecordStore:
    """Append-only mapping of identifier to record."""

    def __init__(self) -> None:
        self._records: dict[int, MessageRecord] = {}
        self._next_id = 1

    def create(self, sender: str, subject: str, body: str, date: str) -> MessageRecord:
        """Build a record with the next identifier and store it.

        Args:
            sender: Sender address.
            subject: Subject line.
            body: Message body.
            date: Date string in a lexically sortable format.

        Returns:
            The stored record.

        Raises:
            pydantic.ValidationError: If the sender is empty.
        """

        record = MessageRecord(
            id=self._next_id,
            sender=sender,
            subject=subject,
            body=body,
            date=date,
        )
        self._records[record.id] = record
        self._next_id += 1
        return record

    def get(self, record_id: int) -> MessageRecord | None:
        """Return the record with the given identifier, or None if unknown."""

        return self._records.get(record_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MessageRecord]:
        # dicts keep insertion order, which is identifier order here
        return iter(self._records.values())
