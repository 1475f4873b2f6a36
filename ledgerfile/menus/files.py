"""Menu dispatcher for a single file record."""

from ledgerfile.exceptions import LedgerFileError
from ledgerfile.logging import get_logger
from ledgerfile.menus.prompt import Prompt
from ledgerfile.models.record import FileRecord
from ledgerfile.records.text_file import FileRecordManager

logger = get_logger(__name__)

MENU = (
    "1. Read the file",
    "2. Write to the file",
    "3. Modify the file",
    "4. Delete the file",
    "5. Quit",
)
QUIT = 5


class FileMenu:
    """Run file operations on one record chosen at session start.

    A successful delete ends the session.
    """

    def __init__(
        self,
        manager: FileRecordManager,
        record: FileRecord,
        prompt: Prompt | None = None,
    ) -> None:
        self.manager = manager
        self.record = record
        self.prompt = prompt or Prompt()

    def run(self) -> None:
        """Loop until the user quits, deletes the file, or input ends."""
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
        self.prompt.say("Thanks for using the file manager.")

    def handle(self, choice: int) -> bool:
        """Dispatch one menu choice. Returns ``False`` when the session ends."""
        if choice == QUIT:
            return False
        try:
            if choice == 1:
                contents = self.manager.read(self.record)
                self.prompt.say(f"Contents of {self.record.name}:\n{contents}")
            elif choice == 2:
                text = self.prompt.read_line("Text to write: ")
                self.manager.append(self.record, text)
                self.prompt.say("Write succeeded.")
            elif choice == 3:
                text = self.prompt.read_line("New contents: ")
                self.manager.overwrite(self.record, text)
                self.prompt.say("File modified.")
            elif choice == 4:
                self.manager.delete(self.record)
                self.prompt.say("File deleted.")
                return False
            else:
                self.prompt.say("Invalid choice.")
        except LedgerFileError as exc:
            logger.warning("File operation %d on %s rejected: %s", choice, self.record.path, exc)
            self.prompt.say(f"Error: {exc}")
        return True
