"""Domain exceptions."""


class LedgerError(Exception):
    """Base class for ledger domain errors."""


class GoalDepositError(LedgerError):
    """Raised when a deposit cannot be applied to a savings goal."""


class TransactionParsingError(LedgerError):
    """Raised when free-form input cannot be turned into a transaction."""


class PermissionDeniedError(LedgerError):
    """Raised when a member may not change the ledger."""


__all__ = [
    "LedgerError",
    "GoalDepositError",
    "TransactionParsingError",
    "PermissionDeniedError",
]
