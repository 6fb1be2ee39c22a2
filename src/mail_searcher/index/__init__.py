"""In-memory message indexing.

This package contains the record store and the three indexes built over it:
records ordered by date, records grouped by exact sender, and an inverted
index of subject and body tokens.
"""

from .context import MailIndex
from .date_tree import DateOrderedIndex
from .sender import SenderIndex
from .store import RecordStore
from .terms import TermIndex, fold, tokenize

__all__ = [
    "DateOrderedIndex",
    "MailIndex",
    "RecordStore",
    "SenderIndex",
    "TermIndex",
    "fold",
    "tokenize",
]
