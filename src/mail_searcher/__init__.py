"""Mail Searcher - in-memory indexing and search for message records.

This package loads message records (sender, subject, body, date) from a
delimited text file and answers three kinds of queries: listing by date,
exact lookup by sender, and keyword lookup over subject and body text.
"""

__version__ = "0.1.0"
__author__ = "Mail Searcher contributors"

from mail_searcher.config import Settings, get_settings
from mail_searcher.index import MailIndex

__all__ = ["MailIndex", "Settings", "get_settings", "__version__", "__author__"]
