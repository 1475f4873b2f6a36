"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest
from faker import Faker

from ledgerfile.menus.prompt import Prompt
from ledgerfile.records.text_file import FileRecordManager
from ledgerfile.store.ledger import AccountLedger

FIXED_MOMENT = datetime(2024, 3, 15, 9, 30, 0, tzinfo=timezone.utc)


class ScriptedPrompt(Prompt):
    """Prompt fed from a list of answers; raises EOFError when exhausted."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = iter(answers)
        self.output: list[str] = []
        super().__init__(input_fn=self._next_answer, output_fn=self.output.append)

    def _next_answer(self, message: str) -> str:
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance for names and text."""
    instance = Faker("fr_FR")
    instance.seed_instance(seed)
    return instance


@pytest.fixture
def ledger() -> AccountLedger:
    """Single-account ledger: Alice with 100."""
    return AccountLedger.from_pairs([("Alice", 100)])


@pytest.fixture
def three_ledger() -> AccountLedger:
    """Ledger with the default three accounts."""
    return AccountLedger.from_pairs([("Kevin", 500), ("Nourdine", 1000), ("Fatou", 750)])


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_MOMENT


@pytest.fixture
def manager(tmp_path: Path, fixed_clock: Callable[[], datetime]) -> FileRecordManager:
    """File record manager rooted at a temporary directory."""
    return FileRecordManager(base_dir=tmp_path, clock=fixed_clock)


@pytest.fixture
def scripted() -> Callable[[list[str]], ScriptedPrompt]:
    """Factory for prompts that replay scripted answers."""
    return ScriptedPrompt
