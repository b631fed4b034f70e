from decimal import Decimal

from assetlens.services.normalization.constants import PROPERTY_FIELDS
from assetlens.services.normalization.field_resolver import resolve, resolve_field, to_decimal, to_int


def test_first_present_alias_wins():
    payload = {"assessval": 50000, "totval": 90000}
    assert resolve(payload, ("parval", "assessval", "totval")) == 50000


def test_nested_fields_checked_for_each_alias():
    payload = {"fields": {"parval": 75000}, "totval": 90000}
    # parval is found under fields before totval is tried at the top level
    assert resolve(payload, ("parval", "assessval", "totval")) == 75000


def test_top_level_preferred_over_nested_for_same_alias():
    payload = {"parval": 1, "fields": {"parval": 2}}
    assert resolve(payload, ("parval",)) == 1


def test_missing_returns_default():
    assert resolve({"other": 1}, ("parval", "assessval"), default=0) == 0
    assert resolve(None, ("parval",), default="x") == "x"
    assert resolve({}, ("parval",)) is None


def test_blank_and_none_values_are_absent():
    payload = {"usedesc": "   ", "usecode": None, "zoning_code": "R-1"}
    assert resolve_field(payload, PROPERTY_FIELDS["property_type"]) == "R-1"


def test_zero_is_present():
    assert resolve({"parval": 0, "assessval": 100}, ("parval", "assessval")) == 0


def test_strings_are_stripped():
    assert resolve({"owner": "  JANE DOE "}, ("owner",)) == "JANE DOE"


def test_path_reaches_nested_owner_record():
    payload = {"fields": {"owners": [{"owner": "SMITH FAMILY TRUST"}]}}
    assert resolve_field(payload, PROPERTY_FIELDS["owner_name"]) == "SMITH FAMILY TRUST"


def test_path_out_of_range_is_absent():
    payload = {"owners": []}
    assert resolve_field(payload, PROPERTY_FIELDS["owner_name"]) is None


def test_property_type_defaults_to_unknown():
    assert resolve_field({}, PROPERTY_FIELDS["property_type"]) == "Unknown"


class TestToDecimal:
    def test_numbers_and_currency_strings(self):
        assert to_decimal(12000) == Decimal("12000")
        assert to_decimal(0.5) == Decimal("0.5")
        assert to_decimal("$1,250,000") == Decimal("1250000")

    def test_non_numeric_values_are_absent(self):
        assert to_decimal("N/A") is None
        assert to_decimal(True) is None
        assert to_decimal(None) is None
        assert to_decimal("NaN") is None

    def test_to_int_truncates(self):
        assert to_int("1995.0") == 1995
        assert to_int("unknown") is None
