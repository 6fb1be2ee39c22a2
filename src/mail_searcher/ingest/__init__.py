"""Loading message records into a ``MailIndex``."""

from .loader import load_records, parse_line
from .seed import SEED_RECORDS, load_seed_records

__all__ = ["SEED_RECORDS", "load_records", "load_seed_records", "parse_line"]
