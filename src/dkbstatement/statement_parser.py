"""
Transaction extraction from DKB credit card statement text.

The text is expected without line breaks, as produced by flattening the
statement PDF. Entries look like

    29.12.23 02.01.24 EDEKA MARTENS, Ammersbek 42,05 -
    15.04.24 monatlicher Kartenpreis 2,50 -
"""

import logging
import re

from .german_format import (
    format_iso_date,
    parse_german_amount,
    parse_german_date,
)
from .models import (
    ParsedTransaction,
    ParseResult,
    ParseWarning,
    ResultMetadata,
    TransactionDirection,
)
from .vendor import extract_vendor_and_location

logger = logging.getLogger(__name__)

# DD.MM.YY DD.MM.YY VENDOR 123,45 -
TRANSACTION_PATTERN = re.compile(
    r"([0-9]{2}\.[0-9]{2}\.[0-9]{2})\s+([0-9]{2}\.[0-9]{2}\.[0-9]{2})\s+"
    r"(.+?)\s+([0-9.]+,[0-9]{2})\s*([-+])",
)

# DD.MM.YY TYPE 123,45 -
SINGLE_DATE_PATTERN = re.compile(
    r"([0-9]{2}\.[0-9]{2}\.[0-9]{2})\s+"
    r"(Saldo letzte Abrechnung|Lastschrift|monatlicher Kartenpreis|Neuer Saldo)\s+"
    r"([0-9.]+,[0-9]{2})\s*([-+])",
)

# Header and footer text the vendor group can swallow
SKIP_VENDORS = [
    "Saldo letzte Abrechnung",
    "Neuer Saldo",
    "Übertrag von Seite",
    "Zwischensumme von Seite",
    "Kontaktdaten",
    "Abrechnungsnummer",
]

BALANCE_TYPES = {"Saldo letzte Abrechnung", "Neuer Saldo"}
PAYMENT_TYPE = "Lastschrift"
CARD_FEE_TYPE = "monatlicher Kartenpreis"
CARD_FEE_DESCRIPTION = "Monthly card fee"


class DKBStatementParser:
    """Parser for the text of DKB credit card statements."""

    bank = "dkb"

    def parse(self, text: str) -> ParseResult:
        """
        Extract all transactions from statement text.

        Args:
            text: Statement text without line breaks

        Returns:
            ParseResult with transactions sorted by booking date
        """
        transactions: list[ParsedTransaction] = []
        warnings: list[ParseWarning] = []

        self._extract_two_date_entries(text, transactions, warnings)
        self._extract_single_date_entries(text, transactions, warnings)

        # ISO dates sort chronologically as strings
        transactions.sort(key=lambda t: t.date)

        logger.debug(
            f"Parsed {len(transactions)} transactions with {len(warnings)} warnings",
        )

        return ParseResult(
            transactions=transactions,
            warnings=warnings,
            metadata=ResultMetadata(bank=self.bank, pages_parsed=1, raw_lines=1),
        )

    def _extract_two_date_entries(
        self,
        text: str,
        transactions: list[ParsedTransaction],
        warnings: list[ParseWarning],
    ) -> None:
        """Extract purchases and refunds carrying receipt and booking date."""
        for match in TRANSACTION_PATTERN.finditer(text):
            receipt_date, booking_date, vendor_raw, amount_str, sign = match.groups()
            vendor = vendor_raw.strip()

            if any(skip in vendor for skip in SKIP_VENDORS):
                continue

            try:
                booking = parse_german_date(booking_date)
                receipt = parse_german_date(receipt_date)
                amount = parse_german_amount(amount_str)
            except ValueError as e:
                warnings.append(self._warning(e, match.group(0)))
                continue

            direction = TransactionDirection.from_sign(sign)
            metadata = {"receipt_date": format_iso_date(receipt)}
            # A credited Lastschrift pays off the card balance
            if vendor == PAYMENT_TYPE and direction is TransactionDirection.CREDIT:
                metadata["is_transfer"] = "true"

            # Only the location is kept; raw_vendor stays untouched
            _, location = extract_vendor_and_location(vendor)

            transactions.append(
                ParsedTransaction(
                    date=format_iso_date(booking),
                    amount=amount,
                    direction=direction,
                    raw_vendor=vendor,
                    description=location or "",
                    metadata=metadata,
                ),
            )

    def _extract_single_date_entries(
        self,
        text: str,
        transactions: list[ParsedTransaction],
        warnings: list[ParseWarning],
    ) -> None:
        """Extract card fees, ignoring balance rows and payments."""
        for match in SINGLE_DATE_PATTERN.finditer(text):
            entry_date, entry_type, amount_str, sign = match.groups()

            if entry_type in BALANCE_TYPES:
                continue

            # Payments are picked up by the two-date pattern
            if entry_type == PAYMENT_TYPE:
                continue

            try:
                parsed_date = parse_german_date(entry_date)
                amount = parse_german_amount(amount_str)
            except ValueError as e:
                warnings.append(self._warning(e, match.group(0)))
                continue

            transactions.append(
                ParsedTransaction(
                    date=format_iso_date(parsed_date),
                    amount=amount,
                    direction=TransactionDirection.from_sign(sign),
                    raw_vendor=entry_type,
                    description=(
                        CARD_FEE_DESCRIPTION
                        if entry_type == CARD_FEE_TYPE
                        else entry_type
                    ),
                    metadata={},
                ),
            )

    @staticmethod
    def _warning(error: Exception, raw: str) -> ParseWarning:
        message = str(error) or "Parse error"
        logger.warning(f"Could not parse statement entry '{raw}': {message}")
        return ParseWarning(line=0, message=message, raw=raw)


def parse_dkb(text: str) -> ParseResult:
    """Parse DKB credit card statement text."""
    return DKBStatementParser().parse(text)
