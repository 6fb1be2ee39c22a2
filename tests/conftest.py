"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
import structlog

from mail_searcher.config import get_settings
from mail_searcher.index import MailIndex


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop logging configuration bound to a previous test's capture streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide settings with colors and seed records disabled."""
    from mail_searcher.config import Settings

    return Settings(
        source_path=Path("does-not-exist.txt"),
        load_seed_records=False,
        color=False,
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def mail_index() -> MailIndex:
    """Provide an empty index."""
    return MailIndex()


@pytest.fixture
def seeded_index() -> MailIndex:
    """Provide an index holding the three sample records (ids 1-3)."""
    from mail_searcher.ingest import load_seed_records

    index = MailIndex()
    load_seed_records(index)
    return index


@pytest.fixture
def sample_source(tmp_path: Path) -> Path:
    """Provide a delimited source file with valid, partial and skipped lines."""
    path = tmp_path / "correos.txt"
    path.write_text(
        "maria@correo.com;Informe mensual;Adjunto el informe del mes;2025-11-08\n"
        ";Sin remitente;Esta linea se ignora;2025-11-01\n"
        "pedro@correo.com;Vacaciones\n"
        "\n"
        "juan@correo.com;Seguimiento;Revisemos el informe;2025-11-12\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input() replacement that replays answers, then raises EOFError."""

    def factory(answers: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return fake_input

    return factory
