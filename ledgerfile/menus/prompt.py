"""Line-based prompting with re-prompt friendly parsing."""

from decimal import Decimal
from typing import Callable, Sequence

from ledgerfile.exceptions import InvalidAmountError
from ledgerfile.store.ledger import parse_amount


class Prompt:
    """Read and parse user input.

    ``input_fn`` and ``output_fn`` default to ``input`` and ``print``; tests
    substitute scripted callables. End of input propagates as ``EOFError``.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def say(self, message: str = "") -> None:
        self.output_fn(message)

    def read_line(self, message: str) -> str:
        return self.input_fn(message).strip()

    def read_int(self, message: str) -> int | None:
        """Read an integer, or print an error and return ``None``."""
        raw = self.read_line(message)
        try:
            return int(raw)
        except ValueError:
            self.say("Invalid input.")
            return None

    def read_amount(self, message: str) -> Decimal | None:
        """Read a monetary amount, or print an error and return ``None``."""
        raw = self.read_line(message)
        try:
            return parse_amount(raw)
        except InvalidAmountError:
            self.say("Invalid input.")
            return None

    def choose(self, labels: Sequence[str], message: str = "Select an account: ") -> int | None:
        """Show a 1-based numbered list and return the 0-based selection."""
        for i, label in enumerate(labels, start=1):
            self.say(f"{i} - {label}")
        number = self.read_int(message)
        if number is None:
            return None
        if not 1 <= number <= len(labels):
            self.say("Invalid choice.")
            return None
        return number - 1
