"""Domain validation helpers."""

from logging import Logger

from src.domain.models.ledger import Transaction


def is_valid_day_of_month(day) -> bool:
    """Return True when ``day`` is an integer between 1 and 31."""
    return isinstance(day, int) and not isinstance(day, bool) and 1 <= day <= 31


def warn_invalid_day(
    account_id: str,
    field_name: str,
    day,
    logger: Logger | None,
) -> bool:
    """Warn when an account's day-of-month setting is out of range.

    Args:
        account_id: Account carrying the setting.
        field_name: Name of the day-of-month field.
        day: Configured value.
        logger: Logger used for warnings.

    Returns:
        bool: True when the day is usable.
    """
    if is_valid_day_of_month(day):
        return True
    if logger is not None:
        logger.warning(
            f"Ignoring {field_name}={day!r} for account {account_id}"
        )
    return False


def warn_negative_amount(
    transaction: Transaction,
    logger: Logger | None,
) -> None:
    """Warn when a transaction violates the non-negative amount convention.

    Args:
        transaction: Transaction to inspect.
        logger: Logger used for warnings.
    """
    if transaction.amount < 0 and logger is not None:
        logger.warning(
            f"Transaction {transaction.id} has negative amount "
            f"{transaction.amount}"
        )


__all__ = [
    "is_valid_day_of_month",
    "warn_invalid_day",
    "warn_negative_amount",
]
