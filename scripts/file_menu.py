#!/usr/bin/env python3
"""Interactive text file manager.

Reads, appends timestamped lines to, overwrites or deletes one text file.
The file name gets a .txt extension when it has none.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledgerfile.config import LedgerFileConfig
from ledgerfile.exceptions import ConfigurationError, InvalidNameError
from ledgerfile.logging import get_logger, setup_logging
from ledgerfile.menus import FileMenu, Prompt

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Manage a text file from a text menu")
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="File to manage (prompted for when omitted)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory for relative file names (default: LEDGERFILE_BASE_DIR or .)",
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

    try:
        config = LedgerFileConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)

    if args.base_dir is not None:
        config.records.base_dir = args.base_dir
    manager = config.records.build_manager()
    prompt = Prompt()

    prompt.say("Welcome to the file manager!")
    name = args.name
    while True:
        if name is None:
            try:
                name = prompt.read_line("Enter the name of the file to manage: ")
            except EOFError:
                return 1
        try:
            record = manager.open_record(name)
            break
        except InvalidNameError as exc:
            prompt.say(f"Error: {exc}")
            name = None

    logger.info("Managing %s", record.path)
    FileMenu(manager, record, prompt).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
