"""In-memory account storage."""

from ledgerfile.store.ledger import AccountLedger, parse_amount

__all__ = ["AccountLedger", "parse_amount"]
