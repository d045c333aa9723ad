"""Error taxonomy shared by the engine, the storage collaborator and the API."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class InvalidInput(LedgerError, ValueError):
    """Text that cannot be interpreted (money amounts, month strings)."""


class NotFound(LedgerError, LookupError):
    """An update or delete targeted an id that is not in the ledger."""


class ValidationFailure(LedgerError, ValueError):
    """A record or change would break a ledger invariant."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
