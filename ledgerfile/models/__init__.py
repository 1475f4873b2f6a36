"""Domain models for the ledger and file records."""

from ledgerfile.models.account import Account, AccountView
from ledgerfile.models.enums import FileState
from ledgerfile.models.record import FileRecord

__all__ = ["Account", "AccountView", "FileRecord", "FileState"]
