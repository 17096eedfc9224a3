"""
Parsing and formatting of German dates and amounts.
"""

import re
from datetime import date

AMOUNT_PATTERN = re.compile(
    r"^(?P<prefix>-)?(?P<units>[0-9]{1,3}(?:\.[0-9]{3})+|[0-9]+),(?P<decimals>[0-9]{1,2})"
    r"(?:\s*(?P<suffix>[-+]))?$",
)

DATE_PATTERN = re.compile(r"^[0-9]{1,2}\.[0-9]{1,2}\.[0-9]{2}(?:[0-9]{2})?$")

# Two-digit years below the pivot belong to this century
CENTURY_PIVOT = 50


class GermanFormatError(ValueError):
    """Exception raised when a German date or amount cannot be parsed."""


def parse_german_amount(text: str) -> int:
    """
    Parse a German formatted amount into cents.

    Handles "1.234,56", "-1.234,56", "1.234,56 -" and "1.234,56 +".

    Args:
        text: Amount with comma as decimal and dot as thousands separator

    Returns:
        Signed amount in cents

    Raises:
        GermanFormatError: If the text is not a well-formed amount
    """
    match = AMOUNT_PATTERN.match(text.strip())
    if not match:
        raise GermanFormatError(f"Invalid amount format: {text}")

    units = int(match.group("units").replace(".", ""))
    cents = int(match.group("decimals").ljust(2, "0"))
    total = units * 100 + cents

    negative = match.group("prefix") == "-" or match.group("suffix") == "-"
    if match.group("suffix") == "+":
        negative = False
    return -total if negative else total


def format_german_amount(cents: int) -> str:
    """Format cents for display, e.g. 123456 -> "1.234,56 €"."""
    sign = "-" if cents < 0 else ""
    euros, rest = divmod(abs(cents), 100)
    grouped = f"{euros:,}".replace(",", ".")
    return f"{sign}{grouped},{rest:02d} €"


def parse_german_date(text: str) -> date:
    """
    Parse a German date such as "28.12.23" (DKB) or "01.12.2017".

    Raises:
        GermanFormatError: If the text has the wrong shape or is not a real date
    """
    if not DATE_PATTERN.match(text.strip()):
        raise GermanFormatError(f"Invalid date format: {text}")

    parts = text.strip().split(".")
    day, month, year = (int(part) for part in parts)
    if len(parts[2]) <= 2:
        year += 2000 if year < CENTURY_PIVOT else 1900

    try:
        return date(year, month, day)
    except ValueError as e:
        raise GermanFormatError(f"Invalid date: {text}") from e


def format_iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
