"""File record model."""

from dataclasses import dataclass
from pathlib import Path

from ledgerfile.models.enums import FileState


@dataclass(frozen=True)
class FileRecord:
    """Handle around one on-disk text file.

    Only the resolved path is held; the file itself is re-opened by every
    operation, so ``state`` always reflects the disk.
    """

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def state(self) -> FileState:
        return FileState.PRESENT if self.path.is_file() else FileState.ABSENT
