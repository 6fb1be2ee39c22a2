"""Screen rendering with ANSI colors.

Every function returns the screen as a string so it can be printed or
inspected in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mail_searcher.models import MessageRecord

RED = "\033[31m"
GREEN = "\033[32m"
WHITE = "\033[37m"
BOLD = "\033[1m"
RESET = "\033[0m"

CLEAR_SCREEN = "\033[2J\033[H"


@dataclass(frozen=True)
class Palette:
    """Wraps text in ANSI codes, or passes it through when disabled."""

    enabled: bool = True

    def paint(self, text: object, *codes: str) -> str:
        if not self.enabled or not codes:
            return str(text)
        return f"{''.join(codes)}{text}{RESET}"

    def title(self, text: str) -> str:
        return self.paint(f"[ {text} ]", BOLD, WHITE)

    def clear(self) -> str:
        return CLEAR_SCREEN if self.enabled else ""


def render_main_menu(palette: Palette) -> str:
    options = [
        ("1", "Ver correos ordenados"),
        ("2", "Buscar por remitente"),
        ("3", "Buscar por palabra clave"),
        ("0", "Salir"),
    ]
    lines = [palette.title("MENU PRINCIPAL"), ""]
    lines += [f"{palette.paint(key, GREEN)}. {label}" for key, label in options]
    return "\n".join(lines) + "\n"


def render_record_detail(record: MessageRecord, palette: Palette) -> str:
    """Full view of one record: headers, then the body."""

    return "\n".join(
        [
            palette.title("LEYENDO MENSAJE"),
            "",
            f"{palette.paint('ID: ', GREEN)}{record.id}",
            f"{palette.paint('Remitente: ', GREEN)}{palette.paint(record.sender, WHITE)}",
            f"{palette.paint('Asunto: ', GREEN)}{palette.paint(record.subject, RED)}",
            f"{palette.paint('Fecha: ', GREEN)}{palette.paint(record.date, WHITE)}",
            "",
            palette.paint(record.body, WHITE),
            "",
        ]
    )


def _rows(records: Iterable[MessageRecord], columns: list[tuple[str, str]], palette: Palette) -> list[str]:
    return [
        "  ".join(palette.paint(getattr(record, field), color) for field, color in columns)
        for record in records
    ]


def render_date_listing(records: list[MessageRecord], palette: Palette) -> str:
    columns = [("id", GREEN), ("sender", WHITE), ("subject", RED), ("date", WHITE)]
    lines = [palette.title("CORREOS ORDENADOS POR FECHA"), ""]
    lines += _rows(records, columns, palette)
    return "\n".join(lines) + "\n"


def render_sender_results(records: list[MessageRecord], palette: Palette) -> str:
    columns = [("id", GREEN), ("subject", WHITE), ("date", WHITE)]
    lines = [palette.title("RESULTADOS"), ""]
    lines += _rows(records, columns, palette)
    return "\n".join(lines) + "\n"


def render_keyword_results(records: list[MessageRecord], palette: Palette) -> str:
    columns = [("id", GREEN), ("subject", RED), ("sender", WHITE), ("date", WHITE)]
    lines = [palette.title("RESULTADOS"), ""]
    lines += _rows(records, columns, palette)
    return "\n".join(lines) + "\n"


def render_message(text: str, palette: Palette, *, error: bool = False) -> str:
    return palette.paint(text, RED if error else GREEN)
