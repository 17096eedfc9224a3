"""
Vendor name handling for DKB card statements.
"""

import re

PAYPAL_LOCATION_PATTERN = re.compile(r"PAYPAL \*([^,]+)")
PAYPAL_SUB_VENDOR_PATTERN = re.compile(r"PAYPAL \*([A-Z0-9]+)", re.IGNORECASE)

PAYMENT_PROCESSORS = [
    re.compile(r"^PAYPAL \*", re.IGNORECASE),
    re.compile(r"^SQ \*", re.IGNORECASE),  # Square
    re.compile(r"^CKO\*", re.IGNORECASE),  # Checkout.com
    re.compile(r"^STRIPE \*", re.IGNORECASE),
]

# Checked in order, first contained alias wins
VENDOR_ALIASES = {
    "AMZN": "AMAZON",
    "AMZN MKTP": "AMAZON",
    "AMAZON EU": "AMAZON",
    "AMAZON PRIME": "AMAZON",
    "MC DONALDS": "MCDONALDS",
    "MCDONALD'S": "MCDONALDS",
    "DB VERTRIEB": "DEUTSCHE BAHN",
    "DB BAHN": "DEUTSCHE BAHN",
    "REWE": "REWE",
    "EDEKA": "EDEKA",
    "LIDL": "LIDL",
    "ALDI": "ALDI",
}


def extract_vendor_and_location(text: str) -> tuple[str, str | None]:
    """
    Split a statement vendor field into a short name and a location.

    Examples:
        "PAYPAL *aichu240600, 35314369001" -> ("PayPal", "aichu240600")
        "AMZN Mktp DE*DD3403EV5, 800-279-6620" -> ("Amazon", None)
        "EDEKA MARTENS, Ammersbek" -> ("EDEKA MARTENS", "Ammersbek")

    Returns:
        Tuple of vendor name and location (None if there is none)
    """
    trimmed = text.strip()

    if trimmed.startswith("PAYPAL"):
        match = PAYPAL_LOCATION_PATTERN.search(trimmed)
        return "PayPal", match.group(1) if match else None

    if "AMZN" in trimmed or "AMAZON" in trimmed:
        return "Amazon", None

    comma_index = trimmed.rfind(",")
    if comma_index > 0:
        return trimmed[:comma_index].strip(), trimmed[comma_index + 1 :].strip()

    return trimmed, None


def normalize_vendor(raw_vendor: str) -> str:
    """
    Normalize a vendor name for consistent rule matching.

    Examples:
        "PAYPAL *SPOTIFY" -> "SPOTIFY"
        "EDEKA MARTENS, HAMBURG" -> "EDEKA MARTENS"
        "AMZN Mktp DE*AB12CD" -> "AMAZON"
        "McDonald's" -> "MCDONALDS"
    """
    if not raw_vendor or not raw_vendor.strip():
        return ""

    vendor = raw_vendor.strip()

    for pattern in PAYMENT_PROCESSORS:
        if pattern.search(vendor):
            vendor = pattern.sub("", vendor).strip()
            break

    comma_index = vendor.find(",")
    if comma_index > 0:
        vendor = vendor[:comma_index].strip()

    vendor = vendor.upper()

    for alias, canonical in VENDOR_ALIASES.items():
        if alias in vendor:
            vendor = canonical
            break

    vendor = re.sub(r"['‘’]", "", vendor)
    vendor = re.sub(r"\s+", " ", vendor)
    vendor = re.sub(r"[*#]+$", "", vendor)
    return vendor.strip()


def extract_paypal_sub_vendor(raw_vendor: str) -> str | None:
    """Return the merchant behind a PayPal payment, e.g. "SPOTIFY"."""
    match = PAYPAL_SUB_VENDOR_PATTERN.search(raw_vendor)
    return match.group(1).upper() if match else None
