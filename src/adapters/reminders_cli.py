"""CLI adapter listing upcoming card bills, card repayments and loan dates.

It wires the reminders use case to the configured ledger database and prints
one line per reminder, soonest first.
"""

from src.domain.models.finance import Reminder
from src.domain.services.reminders import pending_amount
from src.infrastructure.container import (
    build_ledger_repository,
    build_reminders_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import format_amount


def format_reminder(reminder: Reminder) -> str:
    """Return a single printable line for a reminder."""
    when = "today" if reminder.days_left == 0 else f"in {reminder.days_left}d"
    line = f"[{when}] {reminder.title} ({reminder.subtitle})"
    if reminder.amount is not None:
        line += f" amount={format_amount(reminder.amount)}"
    return line


def main() -> None:
    """Print reminders due as of now."""
    logger = get_app_logger()
    repository = build_ledger_repository()
    repository.ensure_schema()
    reminders = build_reminders_use_case(repository).execute()

    if not reminders:
        print("No upcoming reminders.")
        return
    for reminder in reminders:
        print(format_reminder(reminder))
    total = pending_amount(reminders)
    print(f"Pending repayments: {format_amount(total)}")
    logger.info(f"Printed {len(reminders)} reminders.")


if __name__ == "__main__":  # pragma: no cover
    main()
