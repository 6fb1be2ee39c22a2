"""Reader for delimited message files.

Each line holds ``sender;subject;body;date``. Trailing fields may be missing
and are treated as empty; fields past the fourth are ignored. Lines with a
blank sender are skipped.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from mail_searcher.exceptions import ConfigurationError, UnreadableSourceError
from mail_searcher.index import MailIndex
from mail_searcher.models import RawRecord

logger = structlog.get_logger()

_FIELD_COUNT = 4


def parse_line(line: str, delimiter: str = ";") -> RawRecord | None:
    """Parse one source line.

    Args:
        line: Raw line, with or without its line terminator.
        delimiter: Field separator.

    Returns:
        RawRecord, or None when the sender field is empty.
    """

    fields = line.rstrip("\r\n").split(delimiter, _FIELD_COUNT)[:_FIELD_COUNT]
    fields += [""] * (_FIELD_COUNT - len(fields))
    sender, subject, body, date = fields

    if not sender:
        return None

    return RawRecord(sender=sender, subject=subject, body=body, date=date)


def load_records(
    path: Path,
    index: MailIndex,
    *,
    delimiter: str = ";",
    encoding: str = "utf-8",
) -> int:
    """Index every valid line of a delimited file.

    Args:
        path: Source file.
        index: Index receiving the records.
        delimiter: Field separator, a single character.
        encoding: Text encoding of the file.

    Returns:
        Number of records indexed.

    Raises:
        ConfigurationError: If the delimiter is not a single character.
        UnreadableSourceError: If the file cannot be opened or decoded.
    """

    if len(delimiter) != 1:
        raise ConfigurationError(f"Field delimiter must be a single character, got {delimiter!r}")

    try:
        with open(path, encoding=encoding) as fh:
            lines = fh.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("source_unreadable", path=str(path), error=str(exc))
        raise UnreadableSourceError(f"Could not read {path}: {exc}") from exc

    loaded = 0
    skipped = 0
    for line in lines:
        raw = parse_line(line, delimiter)
        if raw is None:
            skipped += 1
            continue
        index.add(raw)
        loaded += 1

    logger.info("records_loaded", path=str(path), loaded=loaded, skipped=skipped)
    return loaded
