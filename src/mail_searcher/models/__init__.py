"""Data models for Mail Searcher.

This module contains Pydantic models for data validation and serialization.
"""

from mail_searcher.models.record import MessageRecord, RawRecord

__all__ = ["MessageRecord", "RawRecord"]
