"""Use case to record a transaction described in free-form text."""

from datetime import datetime
from typing import Callable
from uuid import uuid4

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.transaction_parser import (
    ParsedTransaction,
    TransactionParserPort,
)
from src.domain.errors import TransactionParsingError
from src.domain.models.ledger import Baby, Transaction
from src.domain.policies.permissions import ensure_can_edit
from src.domain.services.normalization import (
    normalize_text,
    parse_category,
    parse_transaction_type,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal


class RecordParsedTransactionUseCase:
    """Parse free-form input and persist the resulting transaction."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        parser: TransactionParserPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port used to resolve babies and persist entries.
            parser: Natural-language transaction parser.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
            clock: Callable returning the current time.
            id_factory: Callable producing new transaction ids.
        """
        self._ledger_repository = ledger_repository
        self._parser = parser
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or datetime.now
        self._id_factory = id_factory or (lambda: uuid4().hex)

    def execute(self, text: str, user_id: str) -> Transaction:
        """Parse ``text`` and record it for ``user_id``.

        Args:
            text: Free-form description such as "lunch 45".
            user_id: Member recording the entry.

        Returns:
            Transaction: The persisted entry.

        Raises:
            TransactionParsingError: If the parser fails or returns an
                unknown transaction type. Nothing is persisted in that case.
            PermissionDeniedError: If the member may not edit the ledger.
                The parser is not called in that case.
        """
        snapshot = self._ledger_repository.fetch_snapshot()
        ensure_can_edit(snapshot.users, user_id)
        try:
            parsed = self._parser.parse(text)
        except TransactionParsingError:
            raise
        except Exception as exc:
            self._logger.error(f"Transaction parser failed: {exc}")
            raise TransactionParsingError(str(exc)) from exc

        transaction = self._to_transaction(parsed, user_id, snapshot.babies)
        self._ledger_repository.save_transaction(transaction)
        self._logger.info(
            f"Recorded {transaction.type.value} {transaction.amount} "
            f"in {transaction.category.value}"
        )
        self._usage_logger.info(
            f"user={user_id} action=record_transaction id={transaction.id}"
        )
        return transaction

    def _to_transaction(
        self,
        parsed: ParsedTransaction,
        user_id: str,
        babies,
    ) -> Transaction:
        tx_type = parse_transaction_type(parsed.type)
        if tx_type is None:
            raise TransactionParsingError(
                f"Unknown transaction type: {parsed.type!r}"
            )
        when = coerce_datetime(parsed.date) or self._clock()
        return Transaction(
            id=self._id_factory(),
            amount=coerce_decimal(parsed.amount),
            type=tx_type,
            category=parse_category(parsed.category),
            date=when,
            note=normalize_text(parsed.note),
            user_id=user_id,
            due_date=coerce_datetime(parsed.due_date),
            baby_id=_resolve_baby_id(parsed.baby_name, babies),
        )


def _resolve_baby_id(name: str | None, babies: tuple[Baby, ...]) -> str | None:
    wanted = normalize_text(name).lower()
    if not wanted:
        return None
    for baby in babies:
        if baby.name.strip().lower() == wanted:
            return baby.id
    return None


__all__ = ["RecordParsedTransactionUseCase"]
