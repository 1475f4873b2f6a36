"""Tests for the menu entry-point scripts."""

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    remaining = iter(answers)

    def fake_input(message: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LEDGERFILE_INITIAL_ACCOUNTS",
        "LEDGERFILE_BASE_DIR",
        "LEDGERFILE_CURRENCY",
        "LEDGERFILE_DEFAULT_EXTENSION",
        "LEDGERFILE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLedgerMenuScript:
    """Tests for scripts/ledger_menu.py."""

    def test_default_accounts(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, ["2", "3", "6"])

        assert load_script("ledger_menu").main([]) == 0

        assert "Fatou has a balance of 750.00 €" in capsys.readouterr().out

    def test_accounts_from_env(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("LEDGERFILE_INITIAL_ACCOUNTS", '{"Alice": 100}')
        feed(monkeypatch, ["4", "1", "150", "4", "1", "50", "3", "1", "25", "2", "1"])

        assert load_script("ledger_menu").main([]) == 0

        out = capsys.readouterr().out
        assert "Error: Insufficient funds: requested 150.00, available 100.00" in out
        assert "Alice has a balance of 75.00 €" in out

    def test_generated_accounts(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, ["1", "6"])

        assert load_script("ledger_menu").main(["--generate", "4", "--seed", "7"]) == 0

        out = capsys.readouterr().out
        assert "4. " in out
        assert "5. " not in out

    def test_bad_config(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("LEDGERFILE_INITIAL_ACCOUNTS", "oops")

        assert load_script("ledger_menu").main([]) == 2
        assert "Configuration error" in capsys.readouterr().err


class TestFileMenuScript:
    """Tests for scripts/file_menu.py."""

    def test_named_file(self, monkeypatch, capsys, tmp_path: Path) -> None:
        feed(monkeypatch, ["3", "hello", "1", "5"])

        assert load_script("file_menu").main(["journal", "--base-dir", str(tmp_path)]) == 0

        assert (tmp_path / "journal.txt").read_text(encoding="utf-8") == "hello"
        assert "Contents of journal.txt:\nhello" in capsys.readouterr().out

    def test_prompts_for_name(self, monkeypatch, capsys, tmp_path: Path) -> None:
        feed(monkeypatch, ["  ", "diary", "2", "entry", "4"])

        assert load_script("file_menu").main(["--base-dir", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Error: File name must not be empty" in out
        assert "File deleted." in out
        assert not (tmp_path / "diary.txt").exists()

    def test_no_name_and_no_input(self, monkeypatch, tmp_path: Path) -> None:
        feed(monkeypatch, [])

        assert load_script("file_menu").main(["--base-dir", str(tmp_path)]) == 1

    def test_base_dir_from_env(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LEDGERFILE_BASE_DIR", str(tmp_path))
        feed(monkeypatch, ["3", "saved", "5"])

        assert load_script("file_menu").main(["notes.md"]) == 0

        assert (tmp_path / "notes.md").read_text(encoding="utf-8") == "saved"
