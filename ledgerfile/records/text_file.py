"""Read, append, overwrite and delete a single text file."""

import os
from datetime import datetime, timezone
from pathlib import Path, PurePath
from typing import Callable

from ledgerfile.exceptions import InvalidNameError, RecordIOError, RecordNotFoundError
from ledgerfile.logging import get_logger
from ledgerfile.models.record import FileRecord

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".txt"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_name(user_input: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Append ``extension`` when the final path component has no extension.

    A component has an extension when it contains a ``.`` that is not its
    last character, so ``".txt"`` and ``"notes.md"`` are returned
    unchanged. Trailing dots are dropped first: ``"data."`` becomes
    ``"data.txt"``. ``resolve_name("data")`` and ``resolve_name("data.txt")``
    both return ``"data.txt"``.

    Raises
    ------
    InvalidNameError
        If the input is blank or names a directory rather than a file.
    """
    name = user_input.strip()
    if not name:
        raise InvalidNameError("File name must not be empty")
    name = name.rstrip(".")
    if not name or name.endswith(("/", "\\")):
        raise InvalidNameError(f"Invalid file name: {user_input!r}")
    if "." in PurePath(name).name:
        return name
    return name + extension


def format_timestamp_line(
    moment: datetime, content: str, fmt: str = DEFAULT_TIMESTAMP_FORMAT
) -> str:
    """Build the line written by an append: ``"<timestamp> - <content>\\n"``."""
    return f"{moment.strftime(fmt)} - {content}\n"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileRecordManager:
    """Operate on text files relative to a base directory.

    Every operation re-opens the file; nothing is cached between calls.
    """

    def __init__(
        self,
        base_dir: str | Path = ".",
        extension: str = DEFAULT_EXTENSION,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        encoding: str = "utf-8",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the manager.

        Parameters
        ----------
        base_dir : str | Path
            Directory that relative paths are resolved against.
        extension : str
            Extension appended to names that have none.
        timestamp_format : str
            ``strftime`` format used for appended lines.
        encoding : str
            Text encoding for reads and writes.
        clock : Callable[[], datetime]
            Source of the current time for appends.
        """
        self.base_dir = Path(base_dir)
        self.extension = extension
        self.timestamp_format = timestamp_format
        self.encoding = encoding
        self.clock = clock

    def resolve_name(self, user_input: str) -> str:
        return resolve_name(user_input, self.extension)

    def open_record(self, user_input: str) -> FileRecord:
        """Return a record for the resolved name under ``base_dir``."""
        return FileRecord(path=self._path(self.resolve_name(user_input)))

    def _path(self, path: str | Path | FileRecord) -> Path:
        if isinstance(path, FileRecord):
            return path.path
        path = Path(path)
        return path if path.is_absolute() else self.base_dir / path

    def read(self, path: str | Path | FileRecord) -> str:
        """Return the full contents of the file."""
        file_path = self._path(path)
        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                contents = f.read()
        except FileNotFoundError as exc:
            raise RecordNotFoundError(f"File {file_path} not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise RecordIOError(f"Cannot read {file_path}: {exc}") from exc

        logger.debug("Read %d characters from %s", len(contents), file_path)
        return contents

    def append(self, path: str | Path | FileRecord, content: str) -> str:
        """Append a timestamped line, creating the file if needed.

        When the existing contents do not end with a newline (for example
        after an overwrite), one is written first so the timestamp always
        starts a line of its own.

        Returns
        -------
        str
            The line that was written, including its trailing newline.
        """
        file_path = self._path(path)
        line = format_timestamp_line(self.clock(), content, self.timestamp_format)
        try:
            needs_newline = self._lacks_final_newline(file_path)
            with open(file_path, "a", encoding=self.encoding, newline="") as f:
                if needs_newline:
                    f.write("\n")
                f.write(line)
        except OSError as exc:
            raise RecordIOError(f"Cannot append to {file_path}: {exc}") from exc

        logger.info("Appended line to %s", file_path)
        return line

    def _lacks_final_newline(self, file_path: Path) -> bool:
        try:
            with open(file_path, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return False
                f.seek(-1, os.SEEK_END)
                return f.read(1) != b"\n"
        except FileNotFoundError:
            return False

    def overwrite(self, path: str | Path | FileRecord, content: str) -> None:
        """Replace the file contents with ``content`` verbatim."""
        file_path = self._path(path)
        try:
            with open(file_path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as exc:
            raise RecordIOError(f"Cannot write {file_path}: {exc}") from exc

        logger.info("Overwrote %s (%d characters)", file_path, len(content))

    def delete(self, path: str | Path | FileRecord) -> None:
        """Permanently remove the file."""
        file_path = self._path(path)
        try:
            file_path.unlink()
        except FileNotFoundError as exc:
            raise RecordNotFoundError(f"File {file_path} not found") from exc
        except OSError as exc:
            raise RecordIOError(f"Cannot delete {file_path}: {exc}") from exc

        logger.info("Deleted %s", file_path)
