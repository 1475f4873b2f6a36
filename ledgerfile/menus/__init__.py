"""Interactive menus that dispatch one operation per choice."""

from ledgerfile.menus.files import FileMenu
from ledgerfile.menus.ledger import LedgerMenu
from ledgerfile.menus.prompt import Prompt

__all__ = ["FileMenu", "LedgerMenu", "Prompt"]
