"""Enumeration types for ledgerfile entities."""

from enum import Enum


class FileState(str, Enum):
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
