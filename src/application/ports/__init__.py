"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .transaction_parser import ParsedTransaction, TransactionParserPort

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "ParsedTransaction",
    "TransactionParserPort",
]
