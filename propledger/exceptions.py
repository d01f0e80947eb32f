"""Custom exception hierarchy for propledger."""


class PropLedgerError(Exception):
    """Base exception for all propledger errors."""


class InvalidInputError(PropLedgerError):
    """Raised when a core record is structurally invalid and cannot be defaulted."""


class EntityNotFoundError(PropLedgerError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class ConfigurationError(PropLedgerError):
    """Raised when configuration is invalid or missing."""


class SnapshotError(PropLedgerError):
    """Raised when a stored snapshot cannot be read or is malformed."""
