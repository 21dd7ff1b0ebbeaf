"""Error types raised by the ledger core."""


class LedgerError(Exception):
    """Base class for ledger failures."""


class ValidationError(LedgerError):
    """Input failed shape or range constraints."""


class StorageError(LedgerError):
    """The underlying persistence layer failed."""
