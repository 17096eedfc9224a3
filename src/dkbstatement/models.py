"""
Data models for DKB statement parsing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TransactionDirection(str, Enum):
    """Direction of a transaction, taken from the trailing sign."""

    DEBIT = "debit"
    CREDIT = "credit"

    @classmethod
    def from_sign(cls, sign: str) -> "TransactionDirection":
        """Map the DKB sign suffix to a direction."""
        return cls.CREDIT if sign == "+" else cls.DEBIT


@dataclass
class ParsedTransaction:
    """A single transaction extracted from a statement."""

    date: str
    amount: int
    direction: TransactionDirection
    raw_vendor: str
    description: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def is_transfer(self) -> bool:
        """Whether this entry settles the card balance rather than income."""
        return self.metadata.get("is_transfer") == "true"

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "amount": self.amount,
            "direction": self.direction.value,
            "raw_vendor": self.raw_vendor,
            "description": self.description,
            "metadata": dict(self.metadata),
        }


@dataclass
class ParseWarning:
    """An entry that matched a pattern but could not be parsed."""

    line: int
    message: str
    raw: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "message": self.message, "raw": self.raw}


@dataclass
class ResultMetadata:
    """Bank-identifying information about a parse."""

    bank: str = "dkb"
    pages_parsed: int = 1
    raw_lines: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "bank": self.bank,
            "pages_parsed": self.pages_parsed,
            "raw_lines": self.raw_lines,
        }


@dataclass
class ParseResult:
    """Result of parsing a statement text."""

    transactions: list[ParsedTransaction]
    warnings: list[ParseWarning]
    metadata: ResultMetadata = field(default_factory=ResultMetadata)

    def to_dict(self) -> dict[str, Any]:
        return {
            "transactions": [t.to_dict() for t in self.transactions],
            "warnings": [w.to_dict() for w in self.warnings],
            "metadata": self.metadata.to_dict(),
        }
