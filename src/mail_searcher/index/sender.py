"""Exact-match index of records by sender."""

from __future__ import annotations

from collections import defaultdict

from mail_searcher.models import MessageRecord


class SenderIndex:
    """Maps a sender string to its records in arrival order.

    Matching is exact and case-sensitive: ``Ana@correo.com`` and
    ``ana@correo.com`` are different senders.
    """

    def __init__(self) -> None:
        self._by_sender: defaultdict[str, list[MessageRecord]] = defaultdict(list)

    def index(self, record: MessageRecord) -> None:
        self._by_sender[record.sender].append(record)

    def lookup(self, sender: str) -> list[MessageRecord]:
        """Return the sender's records, oldest arrival first; empty if unknown."""

        # .get avoids creating an empty entry for unknown senders
        records = self._by_sender.get(sender)
        return list(records) if records else []

    def senders(self) -> list[str]:
        return list(self._by_sender)

    def __len__(self) -> int:
        return len(self._by_sender)
