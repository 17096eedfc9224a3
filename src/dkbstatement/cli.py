"""
Command-line interface for DKB statement parsing.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .output_formatter import CSVFormatter, JSONFormatter, SummaryFormatter
from .pdf_text import PDFExtractionError, extract_statement_text
from .statement_parser import parse_dkb

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["json", "csv", "summary"]


class FileSavingError(Exception):
    """Exception raised when a file cannot be saved."""


def load_config(config_file: str | None) -> dict:
    """Load CLI configuration from JSON file."""
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        logger.debug(f"CLI config file {config_file} does not exist")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        logger.debug(f"Loaded CLI config from {config_file}")
        return config
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in CLI config file {config_file}: {e}")
        return {}
    except OSError as e:
        logger.warning(f"Failed to load CLI config from {config_file}: {e}")
        return {}


def read_statement_text(input_file: str) -> str:
    """Read statement text from a PDF or a plain text file."""
    path = Path(input_file)
    if path.suffix.lower() == ".pdf":
        return extract_statement_text(path)

    with open(path, encoding="utf-8") as f:
        # The parser expects a single line
        return " ".join(f.read().split())


def write_output(output: str, output_file: str | None) -> None:
    """Write the formatted result to a file or stdout."""
    if not output_file:
        sys.stdout.write(output + "\n")
        return

    try:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Output written to {output_file}")
    except OSError as e:
        raise FileSavingError(f"Failed to write output to {output_file}: {e}") from e


def format_result(result, output_format: str, config: dict) -> str:
    if output_format == "csv":
        return CSVFormatter(delimiter=config.get("csv_delimiter", ";")).format(result)
    if output_format == "summary":
        return SummaryFormatter.format_summary(result)
    return JSONFormatter().format(result)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Extract transactions from DKB credit card statements",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--config",
        help="Path to CLI configuration file (contains defaults for output_format, csv_delimiter)",
    )

    parser.add_argument(
        "input_file",
        help="Path to the statement PDF or to its extracted text",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        help="Output format (default: json)",
    )

    parser.add_argument(
        "--output",
        "-o",
        help="Write output to this file instead of stdout",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    output_format = args.format or config.get("output_format", "json")
    if output_format not in OUTPUT_FORMATS:
        logger.error(
            f"Error: unknown output_format '{output_format}', expected one of {OUTPUT_FORMATS}",
        )
        sys.exit(1)

    try:
        text = read_statement_text(args.input_file)
    except (PDFExtractionError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading statement: {e}")
        sys.exit(1)

    result = parse_dkb(text)
    if result.warnings:
        logger.warning(
            f"{len(result.warnings)} entries could not be parsed, results are partial",
        )
    logger.info(f"Found {len(result.transactions)} transactions")

    try:
        write_output(format_result(result, output_format, config), args.output)
    except FileSavingError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
