"""Ledger: денежное состояние токена (balances, allowances, supply)."""

from .ledger import Ledger, LedgerCheckpoint

__all__ = [
    "Ledger",
    "LedgerCheckpoint",
]
