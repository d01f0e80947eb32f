"""In-memory state container for properties, tenants and payments."""

from propledger.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
