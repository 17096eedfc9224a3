"""Unit tests for vendor.py."""

import dkbstatement
from dkbstatement.vendor import (
    extract_paypal_sub_vendor,
    extract_vendor_and_location,
    normalize_vendor,
)


class TestExtractVendorAndLocation:
    """Tests for extract_vendor_and_location."""

    def test_paypal_with_location(self):
        """Test that PayPal takes the text after the asterisk up to the comma."""
        assert extract_vendor_and_location("PAYPAL *aichu240600, 35314369001") == (
            "PayPal",
            "aichu240600",
        )

    def test_paypal_without_comma(self):
        """Test PayPal without comma takes the rest of the text."""
        assert extract_vendor_and_location("PAYPAL *SPOTIFY") == ("PayPal", "SPOTIFY")

    def test_paypal_without_asterisk(self):
        """Test PayPal without asterisk has no location."""
        assert extract_vendor_and_location("PAYPAL EUROPE, LUXEMBOURG") == (
            "PayPal",
            None,
        )

    def test_amazon_variants(self):
        """Test that Amazon entries have no location."""
        assert extract_vendor_and_location("AMZN Mktp DE*DD3403EV5, 800-279-6620") == (
            "Amazon",
            None,
        )
        assert extract_vendor_and_location("AMAZON PRIME*AB12, amzn.com") == (
            "Amazon",
            None,
        )

    def test_paypal_wins_over_amazon(self):
        """Test that the PayPal rule is checked first."""
        assert extract_vendor_and_location("PAYPAL *AMAZON, 123")[0] == "PayPal"

    def test_split_at_last_comma(self):
        """Test that vendor and location are split at the last comma."""
        assert extract_vendor_and_location("EDEKA MARTENS, Ammersbek") == (
            "EDEKA MARTENS",
            "Ammersbek",
        )
        assert extract_vendor_and_location("SHOP, INC, Berlin") == (
            "SHOP, INC",
            "Berlin",
        )

    def test_leading_comma_is_not_split(self):
        """Test that a comma at the start does not split."""
        assert extract_vendor_and_location(",Berlin") == (",Berlin", None)

    def test_plain_vendor(self):
        """Test that text without comma is the vendor name."""
        assert extract_vendor_and_location("  Lastschrift ") == ("Lastschrift", None)


class TestNormalizeVendor:
    """Tests for normalize_vendor."""

    def test_empty(self):
        """Test that blank input normalizes to an empty string."""
        assert normalize_vendor("") == ""
        assert normalize_vendor("   ") == ""

    def test_strips_payment_processor(self):
        """Test removal of payment processor prefixes."""
        assert normalize_vendor("PAYPAL *SPOTIFY") == "SPOTIFY"
        assert normalize_vendor("SQ *COFFEE BAR") == "COFFEE BAR"
        assert normalize_vendor("STRIPE *Notion") == "NOTION"

    def test_removes_location(self):
        """Test that everything after the first comma is dropped."""
        assert normalize_vendor("JIM BLOCK, HAMBURG") == "JIM BLOCK"

    def test_aliases(self):
        """Test that known aliases map to a canonical name."""
        assert normalize_vendor("EDEKA MARTENS, HAMBURG") == "EDEKA"
        assert normalize_vendor("AMZN Mktp DE*AB12CD") == "AMAZON"
        assert normalize_vendor("McDonald's") == "MCDONALDS"
        assert normalize_vendor("DB Vertrieb GmbH") == "DEUTSCHE BAHN"

    def test_cleans_special_characters(self):
        """Test whitespace collapsing and trailing symbol removal."""
        assert normalize_vendor("CAFE   DEL  SOL*#") == "CAFE DEL SOL"


class TestExtractPaypalSubVendor:
    """Tests for extract_paypal_sub_vendor."""

    def test_sub_vendor(self):
        """Test extraction of the merchant behind PayPal."""
        assert extract_paypal_sub_vendor("PAYPAL *SPOTIFY AB123") == "SPOTIFY"
        assert extract_paypal_sub_vendor("paypal *steam") == "STEAM"

    def test_no_paypal(self):
        """Test that non-PayPal text returns None."""
        assert extract_paypal_sub_vendor("EDEKA MARTENS") is None

    def test_exported_from_package(self):
        """Test that the helper is part of the public API."""
        assert dkbstatement.extract_paypal_sub_vendor is extract_paypal_sub_vendor
        assert "extract_paypal_sub_vendor" in dkbstatement.__all__
