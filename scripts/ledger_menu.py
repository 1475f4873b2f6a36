#!/usr/bin/env python3
"""Interactive bank-account ledger.

Starts with the configured initial accounts (or generated ones with
--generate) and loops over a numbered menu until the user quits.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledgerfile.config import LedgerFileConfig
from ledgerfile.exceptions import ConfigurationError
from ledgerfile.generators import AccountGenerator
from ledgerfile.logging import get_logger, setup_logging
from ledgerfile.menus import LedgerMenu

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Manage bank accounts from a text menu")
    parser.add_argument(
        "--generate",
        type=int,
        default=None,
        metavar="N",
        help="Start with N generated accounts instead of the configured ones",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --generate",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LEDGERFILE_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default=None,
        help="Log format (default: LEDGERFILE_LOG_FORMAT or standard)",
    )
    args = parser.parse_args(argv)

    if args.generate is not None and args.generate < 1:
        parser.error("--generate must be at least 1")

    try:
        config = LedgerFileConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)

    if args.generate is not None:
        ledger = AccountGenerator(seed=args.seed).generate_ledger(args.generate)
        logger.info("Generated %d accounts (seed=%s)", len(ledger), args.seed)
    else:
        ledger = config.ledger.build_ledger()

    LedgerMenu(ledger, currency=config.ledger.currency).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
