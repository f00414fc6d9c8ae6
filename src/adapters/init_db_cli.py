"""CLI adapter to create the ledger schema in the configured database."""

from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create missing ledger tables."""
    logger = get_app_logger()
    repository = build_ledger_repository()
    repository.ensure_schema()
    logger.info("Ledger schema is ready.")
    print("Ledger schema is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
