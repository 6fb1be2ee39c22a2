"""Indexing facade holding the record store and its three indexes.

A ``MailIndex`` is the single entry point for adding records. Tests build a
fresh one per case; the CLI builds one per process.
"""

from __future__ import annotations

import structlog

from mail_searcher.index.date_tree import DateOrderedIndex
from mail_searcher.index.sender import SenderIndex
from mail_searcher.index.store import RecordStore
from mail_searcher.index.terms import TermIndex
from mail_searcher.models import MessageRecord, RawRecord

logger = structlog.get_logger()


class MailIndex:
    """Record store plus date, sender and term indexes, updated together."""

    def __init__(self) -> None:
        self.store = RecordStore()
        self.dates = DateOrderedIndex()
        self.senders = SenderIndex()
        self.terms = TermIndex()

    def create_and_index(
        self,
        sender: str,
        subject: str = "",
        body: str = "",
        date: str = "",
    ) -> MessageRecord:
        """Create a record and add it to every index.

        Order: store (assigns the id), term index, sender index, date index.
        Nothing after record creation can fail, so no index is ever left
        holding a record the others lack.

        Returns:
            The newly created record.
        """

        record = self.store.create(sender, subject, body, date)
        self.terms.index(record)
        self.senders.index(record)
        self.dates.insert(record)

        logger.debug("record_indexed", record_id=record.id, sender=record.sender, date=record.date)
        return record

    def add(self, raw: RawRecord) -> MessageRecord:
        return self.create_and_index(raw.sender, raw.subject, raw.body, raw.date)

    def get(self, record_id: int) -> MessageRecord | None:
        return self.store.get(record_id)

    def sorted_by_date(self) -> list[MessageRecord]:
        return self.dates.to_sorted_sequence()

    def by_sender(self, sender: str) -> list[MessageRecord]:
        return self.senders.lookup(sender)

    def search_keyword(self, term: str) -> list[MessageRecord]:
        """Return records containing ``term`` as a whole token, by ascending id."""

        records = (self.store.get(record_id) for record_id in sorted(self.terms.lookup(term)))
        return [record for record in records if record is not None]

    def __len__(self) -> int:
        return len(self.store)
