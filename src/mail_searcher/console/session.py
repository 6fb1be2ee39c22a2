"""Interactive menu over a ``MailIndex``.

Input and output are injected so the loop can be driven from tests with a
scripted sequence of answers.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from mail_searcher.console.render import (
    Palette,
    render_date_listing,
    render_keyword_results,
    render_main_menu,
    render_message,
    render_record_detail,
    render_sender_results,
)
from mail_searcher.index import MailIndex
from mail_searcher.models import MessageRecord

logger = structlog.get_logger()


class InteractiveSession:
    """Menu loop: list by date, search by sender, search by keyword."""

    def __init__(
        self,
        index: MailIndex,
        palette: Palette | None = None,
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.index = index
        self.palette = palette or Palette()
        self._input = input_fn or input
        self._output = output or print

    def run(self) -> None:
        """Run until the user picks 0 or input is exhausted."""

        actions: dict[str, Callable[[], None]] = {
            "1": self.show_sorted,
            "2": self.search_sender,
            "3": self.search_keyword,
        }

        try:
            while True:
                self._output(self.palette.clear() + render_main_menu(self.palette))
                choice = self._input("Seleccione una opcion: ").strip()
                if choice == "0":
                    break
                action = actions.get(choice)
                if action is None:
                    logger.debug("menu_choice_ignored", choice=choice)
                    continue
                action()
        except EOFError:
            logger.debug("session_input_closed")

    def show_sorted(self) -> None:
        records = self.index.sorted_by_date()
        self._output(self.palette.clear() + render_date_listing(records, self.palette))
        self._offer_record("Ingrese ID de correo para abrirlo o 0 para volver: ")

    def search_sender(self) -> None:
        self._output(self.palette.clear() + self.palette.title("BUSCAR POR REMITENTE") + "\n")
        sender = self._input("Ingrese remitente: ")
        records = self.index.by_sender(sender)
        if not records:
            self._output(render_message("No se encontraron correos de ese remitente.", self.palette, error=True))
            self._pause()
            return

        self._output(self.palette.clear() + render_sender_results(records, self.palette))
        self._offer_record("Ingrese ID para abrir correo o 0 para volver: ")

    def search_keyword(self) -> None:
        self._output(self.palette.clear() + self.palette.title("BUSCAR PALABRA CLAVE") + "\n")
        term = self._input("Ingrese palabra: ").strip()
        records = self.index.search_keyword(term)
        if not records:
            self._output(render_message("No se encontraron coincidencias.", self.palette, error=True))
            self._pause()
            return

        self._output(self.palette.clear() + render_keyword_results(records, self.palette))
        self._offer_record("Ingrese ID para abrir correo o 0 para volver: ")

    def open_record(self, record: MessageRecord) -> None:
        self._output(self.palette.clear() + render_record_detail(record, self.palette))
        self._pause("Presione ENTER para volver...")

    def _offer_record(self, prompt: str) -> None:
        answer = self._input("\n" + prompt).strip()
        try:
            record_id = int(answer)
        except ValueError:
            return
        if record_id == 0:
            return

        record = self.index.get(record_id)
        if record is None:
            logger.debug("record_not_found", record_id=record_id)
            return
        self.open_record(record)

    def _pause(self, prompt: str = "") -> None:
        self._input(prompt)
