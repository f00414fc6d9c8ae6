"""Port for turning free-form input into a structured transaction."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ParsedTransaction:
    """Structured record returned by a transaction parser.

    Values are kept raw; the intake use case normalizes them.
    """

    amount: object
    type: str
    category: str
    note: str = ""
    date: str | None = None
    due_date: str | None = None
    baby_name: str | None = None


class TransactionParserPort(Protocol):
    """Port for the natural-language transaction parser."""

    def parse(self, text: str) -> ParsedTransaction:
        """Return the structured record for ``text`` or raise on failure."""


__all__ = ["ParsedTransaction", "TransactionParserPort"]
