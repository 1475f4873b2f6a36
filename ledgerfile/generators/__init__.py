"""Synthetic account generation for demo ledgers."""

from ledgerfile.generators.accounts import AccountGenerator

__all__ = ["AccountGenerator"]
