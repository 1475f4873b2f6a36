"""ledgerfile - in-memory account ledger and timestamped text file records."""

__version__ = "0.1.0"
