"""Account model for the in-memory ledger."""

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple


@dataclass
class Account:
    """Named bank account.

    Balances are kept as ``Decimal`` quantized to cents and never go
    negative. Names are not required to be unique.
    """

    name: str
    balance: Decimal


class AccountView(NamedTuple):
    """Read-only row produced when listing a ledger."""

    index: int
    name: str
    balance: Decimal
