from datetime import datetime, timezone
from decimal import Decimal

from assetlens.utils.formatting import (
    format_acres,
    format_currency,
    format_mileage,
    format_report_date,
    parse_currency,
)


def test_format_currency():
    assert format_currency(12000) == "$12,000"
    assert format_currency(Decimal("1234567.5")) == "$1,234,568"
    assert format_currency(None) == "$0"
    assert format_currency(0) == "$0"


def test_parse_currency():
    assert parse_currency("$12,000") == 12000
    assert parse_currency(" $1,250,000 ") == 1250000
    assert parse_currency("") == 0


def test_parse_currency_malformed_counts_as_zero(caplog):
    assert parse_currency("$12k") == 0
    assert "Malformed currency" in caplog.text


def test_format_mileage():
    assert format_mileage(45000) == "45,000 miles"
    assert format_mileage(0) == "0 miles"


def test_format_report_date():
    assert format_report_date(datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)) == "Oct 19, 2026"
    assert format_report_date(datetime(2026, 3, 5)) == "Mar 5, 2026"


def test_format_acres():
    assert format_acres(None) == "N/A"
    assert format_acres(Decimal("0.5")) == "21,780 sq ft"
    assert format_acres(Decimal("2.256")) == "2.26 acres"
