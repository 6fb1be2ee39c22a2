"""Unit tests for the command-line interface."""

from pathlib import Path

import pytest

from mail_searcher import cli


def _run(capsys: pytest.CaptureFixture[str], *args: str) -> tuple[int, str]:
    code = cli.main(["--no-color", *args])
    return code, capsys.readouterr().out


class TestCli:
    """Test suite for CLI subcommands."""

    def test_list_merges_seed_and_source(self, capsys, sample_source: Path) -> None:
        """Test that list shows seed and file records together, ordered by date."""
        code, out = _run(capsys, "--source", str(sample_source), "list")

        assert code == 0
        assert "Correos cargados correctamente." in out
        listing = out.split("[ CORREOS ORDENADOS POR FECHA ]", 1)[1]
        assert listing.index("2025-11-08") < listing.index("2025-11-09") < listing.index("2025-11-12")

    def test_missing_source_keeps_seed_records(self, capsys, tmp_path: Path) -> None:
        """Test that an unreadable source is reported and the seed records remain."""
        code, out = _run(capsys, "--source", str(tmp_path / "missing.txt"), "list")

        assert code == 0
        assert "No se pudo abrir el archivo." in out
        assert "juan@correo.com" in out

    def test_log_lines_stay_off_stdout(self, capsys, tmp_path: Path) -> None:
        """Test that warnings are logged to stderr, leaving the screen clean."""
        code = cli.main(["--no-color", "--source", str(tmp_path / "missing.txt"), "list"])
        captured = capsys.readouterr()

        assert code == 0
        assert "source_unreadable" not in captured.out
        assert captured.out.splitlines()[0] == "No se pudo abrir el archivo."
        assert "source_unreadable" in captured.err

    def test_invalid_delimiter_is_reported(self, capsys, monkeypatch, sample_source: Path) -> None:
        """Test that a multi-character delimiter setting exits with a message, not a traceback."""
        monkeypatch.setenv("MAIL_SEARCHER_FIELD_DELIMITER", "||")

        code, out = _run(capsys, "--source", str(sample_source), "list")

        assert code == 2
        assert "Configuracion invalida" in out
        assert "[ CORREOS ORDENADOS POR FECHA ]" not in out

    def test_no_seed(self, capsys, sample_source: Path) -> None:
        """Test that --no-seed leaves only the file records."""
        code, out = _run(capsys, "--no-seed", "--source", str(sample_source), "sender", "juan@correo.com")

        assert code == 0
        assert "Seguimiento" in out
        assert "Reunion de equipo" not in out

    def test_sender_without_results(self, capsys, tmp_path: Path) -> None:
        """Test that an unknown sender prints a no-matches message."""
        code, out = _run(capsys, "--source", str(tmp_path / "missing.txt"), "sender", "nadie@correo.com")

        assert code == 0
        assert "No se encontraron correos de ese remitente." in out

    def test_search(self, capsys, sample_source: Path) -> None:
        """Test that keyword search ignores case."""
        code, out = _run(capsys, "--source", str(sample_source), "search", "INFORME")

        assert code == 0
        assert "Informe mensual" in out
        assert "Seguimiento" in out

    def test_show(self, capsys, tmp_path: Path) -> None:
        """Test that show prints the full record."""
        code, out = _run(capsys, "--source", str(tmp_path / "missing.txt"), "show", "3")

        assert code == 0
        assert "Debemos entregar el reporte" in out

    def test_show_unknown_identifier(self, capsys, tmp_path: Path) -> None:
        """Test that show exits with 1 for an unknown identifier."""
        code, out = _run(capsys, "--source", str(tmp_path / "missing.txt"), "show", "999")

        assert code == 1
        assert "999" in out

    def test_default_command_is_interactive(self, capsys, monkeypatch, tmp_path: Path) -> None:
        """Test that running without a subcommand opens the menu."""
        answers = iter(["0"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        code, out = _run(capsys, "--source", str(tmp_path / "missing.txt"))

        assert code == 0
        assert "[ MENU PRINCIPAL ]" in out

    def test_source_from_environment(self, capsys, monkeypatch, sample_source: Path) -> None:
        """Test that the source path and seed flag can come from the environment."""
        monkeypatch.setenv("MAIL_SEARCHER_SOURCE_PATH", str(sample_source))
        monkeypatch.setenv("MAIL_SEARCHER_LOAD_SEED_RECORDS", "false")

        code, out = _run(capsys, "list")

        assert code == 0
        assert "maria@correo.com" in out
        assert "luis@correo.com" not in out
