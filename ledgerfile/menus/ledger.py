"""Menu dispatcher for the account ledger."""

from ledgerfile.exceptions import LedgerFileError
from ledgerfile.logging import get_logger
from ledgerfile.menus.prompt import Prompt
from ledgerfile.store.ledger import AccountLedger

logger = get_logger(__name__)

MENU = (
    "1 - List accounts",
    "2 - Show balance",
    "3 - Deposit",
    "4 - Withdraw",
    "5 - Rename an account",
    "6 - Quit",
)
QUIT = 6


class LedgerMenu:
    """Run ledger operations chosen from a numbered menu."""

    def __init__(
        self, ledger: AccountLedger, prompt: Prompt | None = None, currency: str = "€"
    ) -> None:
        self.ledger = ledger
        self.prompt = prompt or Prompt()
        self.currency = currency

    def run(self) -> None:
        """Loop until the user quits or input ends."""
        try:
            while True:
                self.prompt.say("\n--- MENU ---")
                for line in MENU:
                    self.prompt.say(line)
                choice = self.prompt.read_int("Enter your choice: ")
                if choice is None:
                    continue
                if not self.handle(choice):
                    break
        except EOFError:
            pass
        self.prompt.say("Goodbye!")

    def handle(self, choice: int) -> bool:
        """Dispatch one menu choice. Returns ``False`` when the user quits."""
        actions = {
            1: self._list,
            2: self._show_balance,
            3: self._deposit,
            4: self._withdraw,
            5: self._rename,
        }
        if choice == QUIT:
            return False
        action = actions.get(choice)
        if action is None:
            self.prompt.say("Invalid option.")
            return True

        try:
            action()
        except LedgerFileError as exc:
            logger.warning("Ledger operation %d rejected: %s", choice, exc)
            self.prompt.say(f"Error: {exc}")
        return True

    def _money(self, amount) -> str:
        return f"{amount:.2f} {self.currency}"

    def _select(self) -> int | None:
        return self.prompt.choose([view.name for view in self.ledger.list()])

    def _list(self) -> None:
        self.prompt.say("Accounts:")
        for view in self.ledger.list():
            self.prompt.say(f"{view.index + 1}. {view.name}")

    def _show_balance(self) -> None:
        index = self._select()
        if index is None:
            return
        balance = self.ledger.show_balance(index)
        name = self.ledger.list()[index].name
        self.prompt.say(f"{name} has a balance of {self._money(balance)}")

    def _deposit(self) -> None:
        index = self._select()
        if index is None:
            return
        amount = self.prompt.read_amount("Amount to deposit: ")
        if amount is None:
            return
        balance = self.ledger.deposit(index, amount)
        self.prompt.say(f"Deposited {self._money(amount)}. New balance: {self._money(balance)}")

    def _withdraw(self) -> None:
        index = self._select()
        if index is None:
            return
        amount = self.prompt.read_amount("Amount to withdraw: ")
        if amount is None:
            return
        balance = self.ledger.withdraw(index, amount)
        self.prompt.say(f"Withdrew {self._money(amount)}. New balance: {self._money(balance)}")

    def _rename(self) -> None:
        index = self._select()
        if index is None:
            return
        new_name = self.prompt.read_line("New account name: ")
        old_name = self.ledger.rename(index, new_name)
        self.prompt.say(f"Account {old_name} renamed to {new_name}.")
