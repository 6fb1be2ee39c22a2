"""Message record models.

Records are immutable once created. The record store is the only place that
assigns identifiers; every index holds references to these frozen instances.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawRecord(BaseModel):
    """Field values for one message as read from a source, before indexing."""

    model_config = ConfigDict(frozen=True)

    sender: str = Field(description="Sender address, used verbatim for lookups")
    subject: str = Field(default="", description="Subject line")
    body: str = Field(default="", description="Message body")
    date: str = Field(default="", description="Date in a lexically sortable format")


class MessageRecord(BaseModel):
    """An indexed message with its assigned identifier."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, description="Unique identifier, assigned sequentially from 1")
    sender: str = Field(min_length=1, description="Sender address")
    subject: str = Field(default="", description="Subject line")
    body: str = Field(default="", description="Message body")
    # Compared as plain strings; YYYY-MM-DD sorts chronologically.
    date: str = Field(default="", description="Date in a lexically sortable format")
