"""
Output formatting for parsed statements.
"""

import json
import logging

import pandas as pd

from .german_format import format_german_amount
from .models import ParseResult, TransactionDirection

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "date",
    "amount",
    "direction",
    "raw_vendor",
    "description",
    "receipt_date",
    "is_transfer",
]


class JSONFormatter:
    """Formats parse results as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, result: ParseResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)


class CSVFormatter:
    """Formats parse results as CSV for spreadsheet import."""

    def __init__(self, delimiter: str = ";"):
        self.delimiter = delimiter

    def to_dataframe(self, result: ParseResult) -> pd.DataFrame:
        """
        Build a table with one row per transaction.

        Args:
            result: ParseResult object

        Returns:
            DataFrame with the columns in CSV_COLUMNS
        """
        rows = [
            {
                "date": t.date,
                "amount": t.amount,
                "direction": t.direction.value,
                "raw_vendor": t.raw_vendor,
                "description": t.description,
                "receipt_date": t.metadata.get("receipt_date", ""),
                "is_transfer": t.is_transfer,
            }
            for t in result.transactions
        ]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def format(self, result: ParseResult) -> str:
        df = self.to_dataframe(result)
        logger.debug(f"Formatting {len(df)} rows as CSV")
        return df.to_csv(sep=self.delimiter, index=False)


class SummaryFormatter:
    """Formats summary information."""

    @staticmethod
    def format_summary(result: ParseResult) -> str:
        """Format a summary of the parse result.

        Card balance payments are counted separately and are not part of
        the debit and credit totals.
        """
        transfers = [t for t in result.transactions if t.is_transfer]
        regular = [t for t in result.transactions if not t.is_transfer]

        total_debits = sum(
            t.amount for t in regular if t.direction == TransactionDirection.DEBIT
        )
        total_credits = sum(
            t.amount for t in regular if t.direction == TransactionDirection.CREDIT
        )

        lines = []
        lines.append(f"=== {result.metadata.bank.upper()} Statement Summary ===")
        lines.append(f"Transactions found: {len(result.transactions)}")
        lines.append(f"Total debits: {format_german_amount(total_debits)}")
        lines.append(f"Total credits: {format_german_amount(total_credits)}")
        lines.append(
            f"Card payments: {len(transfers)} "
            f"({format_german_amount(sum(t.amount for t in transfers))})",
        )

        if result.warnings:
            lines.append("")
            lines.append(f"Warnings: {len(result.warnings)}")
            for warning in result.warnings:
                lines.append(f"  • {warning.message} ({warning.raw})")

        return "\n".join(lines)
