"""Tests for domain models."""

from decimal import Decimal
from pathlib import Path

from ledgerfile.models import Account, AccountView, FileRecord, FileState


class TestAccount:
    """Tests for Account model."""

    def test_account_creation(self) -> None:
        account = Account(name="Alice", balance=Decimal("100.00"))

        assert account.name == "Alice"
        assert account.balance == Decimal("100.00")

    def test_account_is_mutable(self) -> None:
        account = Account(name="Alice", balance=Decimal("100.00"))
        account.name = "Bob"

        assert account.name == "Bob"


class TestAccountView:
    """Tests for AccountView rows."""

    def test_unpacks_as_tuple(self) -> None:
        index, name, balance = AccountView(0, "Alice", Decimal("1.00"))

        assert (index, name, balance) == (0, "Alice", Decimal("1.00"))


class TestFileRecord:
    """Tests for FileRecord model."""

    def test_name(self, tmp_path: Path) -> None:
        record = FileRecord(path=tmp_path / "notes.txt")
        assert record.name == "notes.txt"

    def test_state_follows_disk(self, tmp_path: Path) -> None:
        record = FileRecord(path=tmp_path / "notes.txt")
        assert record.state == FileState.ABSENT

        record.path.write_text("hi", encoding="utf-8")
        assert record.state == FileState.PRESENT

        record.path.unlink()
        assert record.state == FileState.ABSENT

    def test_directory_is_not_present(self, tmp_path: Path) -> None:
        record = FileRecord(path=tmp_path)
        assert record.state == FileState.ABSENT

    def test_file_state_values(self) -> None:
        assert FileState.ABSENT.value == "ABSENT"
        assert FileState.PRESENT == "PRESENT"
