"""SQLAlchemy-backed repository for ledger entities."""

import json
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.categories import Category
from src.domain.models.ledger import (
    Baby,
    CreditCardAccount,
    LedgerSnapshot,
    LoanAccount,
    Permissions,
    SavingsGoal,
    Transaction,
    User,
)
from src.domain.services.normalization import (
    parse_category,
    parse_transaction_type,
)
from src.domain.services.validation import warn_negative_amount
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        name TEXT,
        avatar TEXT,
        is_family_admin INTEGER DEFAULT 0,
        can_view INTEGER,
        can_edit INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS babies (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        name TEXT,
        avatar TEXT,
        birth_date TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS credit_cards (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        bank_name TEXT,
        card_name TEXT,
        last4_digits TEXT,
        credit_limit TEXT,
        bill_day INTEGER,
        repayment_day INTEGER,
        balance TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS loans (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        name TEXT,
        bank_name TEXT,
        total_amount TEXT,
        balance TEXT,
        interest_day INTEGER,
        monthly_repayment TEXT,
        category TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS goals (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        name TEXT,
        target_amount TEXT,
        current_amount TEXT,
        icon TEXT,
        color TEXT,
        deadline TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        user_id TEXT,
        amount TEXT,
        type TEXT,
        category TEXT,
        note TEXT,
        date TEXT,
        due_date TEXT,
        baby_id TEXT,
        card_id TEXT,
        loan_id TEXT,
        attachments TEXT
    )
    """,
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _flag(value: bool | None) -> int | None:
    if value is None:
        return None
    return 1 if value else 0


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for every ledger entity."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def ensure_schema(self) -> None:
        """Create the ledger tables if they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.execute(text(statement))
        self._logger.info("Ledger schema ensured")

    def fetch_snapshot(self) -> LedgerSnapshot:
        """Return every entity collection in insertion order."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            users = self._select(conn, "users")
            babies = self._select(conn, "babies")
            cards = self._select(conn, "credit_cards")
            loans = self._select(conn, "loans")
            goals = self._select(conn, "goals")
            transactions = self._select(conn, "transactions")
        snapshot = LedgerSnapshot(
            users=tuple(self._to_user(row) for row in users),
            babies=tuple(self._to_baby(row) for row in babies),
            credit_cards=tuple(self._to_card(row) for row in cards),
            loans=tuple(self._to_loan(row) for row in loans),
            goals=tuple(self._to_goal(row) for row in goals),
            transactions=tuple(
                tx
                for tx in (self._to_transaction(row) for row in transactions)
                if tx is not None
            ),
        )
        self._logger.info(
            f"Loaded snapshot with {len(snapshot.transactions)} transactions"
        )
        return snapshot

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert or replace a transaction by id."""
        warn_negative_amount(transaction, self._logger)
        self._upsert(
            "transactions",
            {
                "id": transaction.id,
                "user_id": transaction.user_id,
                "amount": str(transaction.amount),
                "type": transaction.type.value,
                "category": transaction.category.value,
                "note": transaction.note,
                "date": _iso(transaction.date),
                "due_date": _iso(transaction.due_date),
                "baby_id": transaction.baby_id,
                "card_id": transaction.card_id,
                "loan_id": transaction.loan_id,
                "attachments": json.dumps(list(transaction.attachments)),
            },
        )

    def save_goal(self, goal: SavingsGoal) -> None:
        """Insert or replace a savings goal by id."""
        self._upsert(
            "goals",
            {
                "id": goal.id,
                "name": goal.name,
                "target_amount": str(goal.target_amount),
                "current_amount": str(goal.current_amount),
                "icon": goal.icon,
                "color": goal.color,
                "deadline": _iso(goal.deadline),
            },
        )

    def save_user(self, user: User) -> None:
        """Insert or replace a family member by id."""
        permissions = user.permissions
        self._upsert(
            "users",
            {
                "id": user.id,
                "name": user.name,
                "avatar": user.avatar,
                "is_family_admin": _flag(user.is_family_admin),
                "can_view": _flag(permissions.can_view if permissions else None),
                "can_edit": _flag(permissions.can_edit if permissions else None),
            },
        )

    def save_baby(self, baby: Baby) -> None:
        """Insert or replace a baby by id."""
        self._upsert(
            "babies",
            {
                "id": baby.id,
                "name": baby.name,
                "avatar": baby.avatar,
                "birth_date": _iso(baby.birth_date),
            },
        )

    def save_credit_card(self, card: CreditCardAccount) -> None:
        """Insert or replace a credit card by id."""
        self._upsert(
            "credit_cards",
            {
                "id": card.id,
                "bank_name": card.bank_name,
                "card_name": card.card_name,
                "last4_digits": card.last4_digits,
                "credit_limit": str(card.credit_limit),
                "bill_day": card.bill_day,
                "repayment_day": card.repayment_day,
                "balance": str(card.balance),
            },
        )

    def save_loan(self, loan: LoanAccount) -> None:
        """Insert or replace a loan by id."""
        self._upsert(
            "loans",
            {
                "id": loan.id,
                "name": loan.name,
                "bank_name": loan.bank_name,
                "total_amount": str(loan.total_amount),
                "balance": str(loan.balance),
                "interest_day": loan.interest_day,
                "monthly_repayment": str(loan.monthly_repayment),
                "category": loan.category.value,
            },
        )

    def delete(self, table: str, entity_id: str) -> None:
        """Delete an entity by id without touching referencing rows.

        Args:
            table: One of the ledger tables.
            entity_id: Identifier of the row to delete.

        Raises:
            ValueError: If the table is not a ledger table.
        """
        self._check_table(table)
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                text(f"DELETE FROM {table} WHERE id = :id"),
                {"id": entity_id},
            )

    def _upsert(self, table: str, values: dict) -> None:
        """Update a row in place or append it after the last one."""
        self._check_table(table)
        columns = [name for name in values if name != "id"]
        assignments = ", ".join(f"{name} = :{name}" for name in columns)
        insert_columns = ", ".join(["id", "seq", *columns])
        insert_values = ", ".join(f":{name}" for name in ["id", "seq", *columns])
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            updated = conn.execute(
                text(f"UPDATE {table} SET {assignments} WHERE id = :id"),
                values,
            )
            if updated.rowcount:
                return
            seq = conn.execute(
                text(f"SELECT COALESCE(MAX(seq), 0) + 1 FROM {table}")
            ).scalar_one()
            conn.execute(
                text(
                    f"INSERT INTO {table} ({insert_columns}) "
                    f"VALUES ({insert_values})"
                ),
                {**values, "seq": seq},
            )

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in (
            "users",
            "babies",
            "credit_cards",
            "loans",
            "goals",
            "transactions",
        ):
            raise ValueError(f"Unknown ledger table: {table}")

    @staticmethod
    def _select(conn: Connection, table: str):
        return conn.execute(text(f"SELECT * FROM {table} ORDER BY seq")).all()

    @staticmethod
    def _to_user(row) -> User:
        permissions = None
        if row.can_view is not None or row.can_edit is not None:
            permissions = Permissions(
                can_view=bool(row.can_view),
                can_edit=bool(row.can_edit),
            )
        return User(
            id=row.id,
            name=row.name or "",
            avatar=row.avatar or "",
            is_family_admin=bool(row.is_family_admin),
            permissions=permissions,
        )

    def _to_baby(self, row) -> Baby:
        return Baby(
            id=row.id,
            name=row.name or "",
            avatar=row.avatar or "",
            birth_date=self._parse_date(row.birth_date, f"baby {row.id}"),
        )

    @staticmethod
    def _to_card(row) -> CreditCardAccount:
        return CreditCardAccount(
            id=row.id,
            bank_name=row.bank_name or "",
            card_name=row.card_name or "",
            last4_digits=row.last4_digits or "",
            credit_limit=coerce_decimal(row.credit_limit),
            bill_day=row.bill_day,
            repayment_day=row.repayment_day,
            balance=coerce_decimal(row.balance),
        )

    def _to_loan(self, row) -> LoanAccount:
        category = parse_category(row.category)
        if not isinstance(category, Category):
            self._logger.warning(
                f"Loan {row.id} has unknown category {row.category!r}"
            )
            category = Category.OTHER
        return LoanAccount(
            id=row.id,
            name=row.name or "",
            bank_name=row.bank_name or "",
            total_amount=coerce_decimal(row.total_amount),
            balance=coerce_decimal(row.balance),
            interest_day=row.interest_day,
            monthly_repayment=coerce_decimal(row.monthly_repayment),
            category=category,
        )

    def _to_goal(self, row) -> SavingsGoal:
        return SavingsGoal(
            id=row.id,
            name=row.name or "",
            target_amount=coerce_decimal(row.target_amount),
            current_amount=coerce_decimal(row.current_amount),
            icon=row.icon or "",
            color=row.color or "",
            deadline=self._parse_date(row.deadline, f"goal {row.id}"),
        )

    def _to_transaction(self, row) -> Transaction | None:
        kind = parse_transaction_type(row.type)
        if kind is None:
            self._logger.warning(
                f"Skipping transaction {row.id} with unknown type {row.type!r}"
            )
            return None
        attachments: tuple[str, ...] = ()
        if row.attachments:
            try:
                attachments = tuple(json.loads(row.attachments))
            except (TypeError, ValueError):
                self._logger.warning(
                    f"Ignoring malformed attachments of transaction {row.id}"
                )
        transaction = Transaction(
            id=row.id,
            amount=coerce_decimal(row.amount),
            type=kind,
            category=parse_category(row.category),
            date=self._parse_date(row.date, f"transaction {row.id}"),
            note=row.note or "",
            user_id=row.user_id or "",
            due_date=self._parse_date(row.due_date, f"transaction {row.id}"),
            baby_id=row.baby_id or None,
            card_id=row.card_id or None,
            loan_id=row.loan_id or None,
            attachments=attachments,
        )
        warn_negative_amount(transaction, self._logger)
        return transaction

    def _parse_date(self, raw, owner: str) -> datetime | None:
        parsed = coerce_datetime(raw)
        if parsed is None and raw:
            self._logger.warning(f"Unparseable date {raw!r} on {owner}")
        return parsed


__all__ = ["SqlAlchemyLedgerRepository", "SCHEMA_STATEMENTS"]
