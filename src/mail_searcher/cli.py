"""Command-line interface for Mail Searcher.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from mail_searcher import __version__
from mail_searcher.config import Settings, get_settings
from mail_searcher.console import InteractiveSession, Palette
from mail_searcher.console.render import (
    render_date_listing,
    render_keyword_results,
    render_message,
    render_record_detail,
    render_sender_results,
)
from mail_searcher.exceptions import ConfigurationError, UnreadableSourceError
from mail_searcher.index import MailIndex
from mail_searcher.ingest import load_records, load_seed_records

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mail-searcher", description="Mail Searcher")
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Delimited file with sender;subject;body;date lines (default: settings source_path)",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not index the built-in sample records",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("interactive", help="Open the interactive menu (default)")
    subparsers.add_parser("list", help="List all records ordered by date")

    sender_parser = subparsers.add_parser("sender", help="List records from an exact sender")
    sender_parser.add_argument("sender", help="Sender address, matched case-sensitively")

    search_parser = subparsers.add_parser("search", help="Find records containing a keyword")
    search_parser.add_argument("term", help="Single word, matched case-insensitively")

    show_parser = subparsers.add_parser("show", help="Show one record in full")
    show_parser.add_argument("id", type=int, help="Record identifier")

    return parser


def build_index(settings: Settings, palette: Palette, source: Path | None = None) -> MailIndex:
    """Create an index holding the seed records and the source file contents.

    An unreadable source file is reported and skipped; the index then holds
    only the seed records, if any.
    """

    index = MailIndex()
    if settings.load_seed_records:
        load_seed_records(index)

    source_path = source or settings.source_path
    try:
        load_records(
            source_path,
            index,
            delimiter=settings.field_delimiter,
            encoding=settings.source_encoding,
        )
    except UnreadableSourceError:
        print(render_message("No se pudo abrir el archivo.", palette, error=True))
    else:
        print(render_message("Correos cargados correctamente.", palette))

    return index


def _cmd_list(index: MailIndex, palette: Palette) -> int:
    print(render_date_listing(index.sorted_by_date(), palette), end="")
    return 0


def _cmd_sender(index: MailIndex, palette: Palette, sender: str) -> int:
    records = index.by_sender(sender)
    if not records:
        print(render_message("No se encontraron correos de ese remitente.", palette, error=True))
        return 0
    print(render_sender_results(records, palette), end="")
    return 0


def _cmd_search(index: MailIndex, palette: Palette, term: str) -> int:
    records = index.search_keyword(term)
    if not records:
        print(render_message("No se encontraron coincidencias.", palette, error=True))
        return 0
    print(render_keyword_results(records, palette), end="")
    return 0


def _cmd_show(index: MailIndex, palette: Palette, record_id: int) -> int:
    record = index.get(record_id)
    if record is None:
        print(render_message(f"No existe un correo con ID {record_id}.", palette, error=True))
        return 1
    print(render_record_detail(record, palette), end="")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Mail Searcher CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging; screens own stdout
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    logger.info("mail_searcher_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    if parsed.no_seed:
        settings = settings.model_copy(update={"load_seed_records": False})
    palette = Palette(enabled=settings.color and not parsed.no_color)

    command = parsed.command or "interactive"
    try:
        index = build_index(settings, palette, parsed.source)
    except ConfigurationError as exc:
        logger.error("invalid_configuration", error=str(exc))
        print(render_message(f"Configuracion invalida: {exc}", palette, error=True))
        return 2

    if command == "interactive":
        InteractiveSession(index, palette).run()
        return 0
    if command == "list":
        return _cmd_list(index, palette)
    if command == "sender":
        return _cmd_sender(index, palette, parsed.sender)
    if command == "search":
        return _cmd_search(index, palette, parsed.term)
    if command == "show":
        return _cmd_show(index, palette, parsed.id)

    logger.error("unknown_command", command=command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
