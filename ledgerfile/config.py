"""Configuration management for ledgerfile."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from ledgerfile.exceptions import ConfigurationError, InvalidAmountError
from ledgerfile.records.text_file import (
    DEFAULT_EXTENSION,
    DEFAULT_TIMESTAMP_FORMAT,
    FileRecordManager,
)
from ledgerfile.store.ledger import AccountLedger, parse_amount

DEFAULT_ACCOUNTS: dict[str, Decimal] = {
    "Kevin": Decimal("500.00"),
    "Nourdine": Decimal("1000.00"),
    "Fatou": Decimal("750.00"),
}

LOG_FORMATS = ("standard", "json")


@dataclass
class LedgerConfig:
    """Account ledger configuration."""

    initial_accounts: dict[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_ACCOUNTS)
    )
    currency: str = "€"

    def build_ledger(self) -> AccountLedger:
        """Create a ledger holding the initial accounts, in insertion order."""
        return AccountLedger.from_pairs(self.initial_accounts.items())


@dataclass
class RecordConfig:
    """File record configuration."""

    base_dir: Path = field(default_factory=lambda: Path("."))
    default_extension: str = DEFAULT_EXTENSION
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    encoding: str = "utf-8"

    def build_manager(self) -> FileRecordManager:
        """Create a file record manager from this configuration."""
        return FileRecordManager(
            base_dir=self.base_dir,
            extension=self.default_extension,
            timestamp_format=self.timestamp_format,
            encoding=self.encoding,
        )


@dataclass
class LedgerFileConfig:
    """Main configuration for ledgerfile."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    records: RecordConfig = field(default_factory=RecordConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerFileConfig":
        """Create config from environment variables."""
        import codecs
        import json
        import os

        accounts_str = os.getenv("LEDGERFILE_INITIAL_ACCOUNTS")
        if accounts_str:
            try:
                raw_accounts = json.loads(accounts_str)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(
                    f"LEDGERFILE_INITIAL_ACCOUNTS is not valid JSON: {exc}"
                ) from exc
            if not isinstance(raw_accounts, dict):
                raise ConfigurationError("LEDGERFILE_INITIAL_ACCOUNTS must be a JSON object")
            try:
                initial_accounts = {
                    str(name): parse_amount(balance) for name, balance in raw_accounts.items()
                }
            except InvalidAmountError as exc:
                raise ConfigurationError(f"LEDGERFILE_INITIAL_ACCOUNTS: {exc}") from exc
            if any(balance < 0 for balance in initial_accounts.values()):
                raise ConfigurationError("LEDGERFILE_INITIAL_ACCOUNTS balances must not be negative")
        else:
            initial_accounts = dict(DEFAULT_ACCOUNTS)

        ledger = LedgerConfig(
            initial_accounts=initial_accounts,
            currency=os.getenv("LEDGERFILE_CURRENCY", "€"),
        )

        extension = os.getenv("LEDGERFILE_DEFAULT_EXTENSION", DEFAULT_EXTENSION)
        if not extension.startswith(".") or len(extension) < 2:
            raise ConfigurationError(
                f"LEDGERFILE_DEFAULT_EXTENSION must look like '.txt', got {extension!r}"
            )

        encoding = os.getenv("LEDGERFILE_ENCODING", "utf-8")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown LEDGERFILE_ENCODING: {encoding}") from exc

        records = RecordConfig(
            base_dir=Path(os.getenv("LEDGERFILE_BASE_DIR", ".")),
            default_extension=extension,
            timestamp_format=os.getenv("LEDGERFILE_TIMESTAMP_FORMAT", DEFAULT_TIMESTAMP_FORMAT),
            encoding=encoding,
        )

        log_format = os.getenv("LEDGERFILE_LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LEDGERFILE_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}"
            )

        return cls(
            ledger=ledger,
            records=records,
            log_level=os.getenv("LEDGERFILE_LOG_LEVEL", "WARNING"),
            log_format=log_format,
        )
