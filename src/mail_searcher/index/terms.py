"""Inverted index from lowercase tokens to record identifiers.

A token is a maximal run of alphanumeric characters in the original text,
folded to lowercase; everything else separates tokens and is discarded.
Membership only: the index records whether a token occurs in a record, not
how often or where.
"""

from __future__ import annotations

import re
import unicodedata

from mail_searcher.models import MessageRecord

# \w minus underscore: letters and digits in any script
_TOKEN_RE = re.compile(r"[^\W_]+")


def fold(word: str) -> str:
    """Lowercase a word, dropping combining marks that lowercasing introduces.

    Tokens are split before folding, so "İ" (which lowercases to "i" plus
    U+0307) does not break a word in two.

    >>> fold("İstanbul")
    'istanbul'
    """

    return "".join(ch for ch in word.lower() if not unicodedata.combining(ch))


def tokenize(text: str) -> list[str]:
    """Split text into lowercase alphanumeric tokens, in order of appearance.

    >>> tokenize("Reunion urgente, mañana!")
    ['reunion', 'urgente', 'mañana']
    """

    return [fold(token) for token in _TOKEN_RE.findall(text)]


class TermIndex:
    """Token -> set of record identifiers."""

    def __init__(self) -> None:
        self._postings: dict[str, set[int]] = {}

    def index(self, record: MessageRecord) -> None:
        """Add the record's identifier under every distinct token of subject and body."""

        for token in set(tokenize(f"{record.subject} {record.body}")):
            self._postings.setdefault(token, set()).add(record.id)

    def lookup(self, term: str) -> frozenset[int]:
        """Return identifiers of records containing the whole token ``term``.

        The term is folded like tokens before lookup. No prefix, substring or
        fuzzy matching is done, so a term containing separators never matches.
        """

        ids = self._postings.get(fold(term))
        return frozenset(ids) if ids else frozenset()

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and fold(term) in self._postings

    def __len__(self) -> int:
        return len(self._postings)
