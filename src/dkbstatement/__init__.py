"""
DKB Statement - transaction extraction from DKB credit card statements.

This package turns the text of DKB credit card PDF statements into
structured transactions and formats them as JSON, CSV or a summary.
"""

from .german_format import (
    GermanFormatError,
    format_german_amount,
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
from .output_formatter import CSVFormatter, JSONFormatter, SummaryFormatter
from .statement_parser import DKBStatementParser, parse_dkb
from .vendor import (
    extract_paypal_sub_vendor,
    extract_vendor_and_location,
    normalize_vendor,
)

__version__ = "0.1.0"
__all__ = [
    "CSVFormatter",
    "DKBStatementParser",
    "GermanFormatError",
    "JSONFormatter",
    "ParseResult",
    "ParseWarning",
    "ParsedTransaction",
    "ResultMetadata",
    "SummaryFormatter",
    "TransactionDirection",
    "extract_paypal_sub_vendor",
    "extract_vendor_and_location",
    "format_german_amount",
    "format_iso_date",
    "normalize_vendor",
    "parse_dkb",
    "parse_german_amount",
    "parse_german_date",
]
