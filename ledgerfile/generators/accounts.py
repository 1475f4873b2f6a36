"""Account generator for demo ledgers."""

from decimal import ROUND_HALF_UP, Decimal

from ledgerfile.generators.base import BaseGenerator
from ledgerfile.models.account import Account
from ledgerfile.store.ledger import AccountLedger


class AccountGenerator(BaseGenerator):
    """Generate accounts with person names and cent-exact balances."""

    MAX_BALANCE = 5000

    def generate(self) -> Account:
        """Generate a single account.

        Returns
        -------
        Account
            Account with a Faker first name and a balance in
            ``[0, MAX_BALANCE]``.
        """
        cents = self.rng.randint(0, self.MAX_BALANCE * 100)
        balance = (Decimal(cents) / 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return Account(name=self.fake.first_name(), balance=balance)

    def generate_many(self, count: int) -> list[Account]:
        """Generate ``count`` accounts."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate() for _ in range(count)]

    def generate_ledger(self, count: int) -> AccountLedger:
        """Generate a ledger holding ``count`` accounts."""
        return AccountLedger(self.generate_many(count))
