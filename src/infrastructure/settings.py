"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_MONTHLY_BUDGET
from src.domain.models.finance import VisibilityScope
from src.domain.services.normalization import parse_scope
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for the household ledger.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        monthly_budget: Spending limit used for budget health.
        current_user_id: Member whose entries form the "self" scope.
        scope: Default visibility scope.
    """

    db_url: str
    monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET
    current_user_id: str | None = None
    scope: VisibilityScope = VisibilityScope.FAMILY

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values from a `.env` file in the working tree are loaded first;
        variables already set in the environment win.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("LEDGER_DB_URL", "").strip()
        if not db_url:
            db_url = cls._default_db_url()
        budget = cls._parse_budget(
            os.getenv("LEDGER_MONTHLY_BUDGET"),
            logger=logger,
        )
        user_id = os.getenv("LEDGER_CURRENT_USER_ID", "").strip() or None
        scope = cls._parse_scope(os.getenv("LEDGER_SCOPE"), logger=logger)
        return cls(
            db_url=db_url,
            monthly_budget=budget,
            current_user_id=user_id,
            scope=scope,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL of ``data/ledger.db`` in the project."""
        path = Path(get_project_root()) / "data" / "ledger.db"
        return f"sqlite:///{path}"

    @staticmethod
    def _parse_budget(raw: str | None, logger) -> Decimal:
        """Parse the monthly budget, falling back to the default.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed non-negative budget.
        """
        if raw is None or not raw.strip():
            return DEFAULT_MONTHLY_BUDGET
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid LEDGER_MONTHLY_BUDGET={raw!r}")
            return DEFAULT_MONTHLY_BUDGET
        if not value.is_finite() or value < 0:
            logger.warning(f"Invalid LEDGER_MONTHLY_BUDGET={raw!r}")
            return DEFAULT_MONTHLY_BUDGET
        return value

    @staticmethod
    def _parse_scope(raw: str | None, logger) -> VisibilityScope:
        if raw is None or not raw.strip():
            return VisibilityScope.FAMILY
        scope = parse_scope(raw)
        if scope is None:
            logger.warning(f"Invalid LEDGER_SCOPE={raw!r}, using family")
            return VisibilityScope.FAMILY
        return scope


__all__ = ["LedgerSettings"]
