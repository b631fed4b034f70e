from decimal import Decimal

import pytest

from assetlens.core.exceptions import NoComparableDataError
from assetlens.services.normalization.property_normalizer import PropertyNormalizer


@pytest.fixture
def normalizer():
    return PropertyNormalizer(market_value_markup=Decimal("0.10"))


def test_normalizes_nested_v2_parcel(normalizer, sample_parcel):
    fields = normalizer.normalize(sample_parcel)

    assert fields.assessed_value == Decimal("100000")
    assert fields.market_value == Decimal("110000")
    assert fields.land_value == Decimal("40000")
    assert fields.improvement_value == Decimal("60000")
    assert fields.lot_size == Decimal("0.5")
    assert fields.property_type == "Single Family Residential"
    assert fields.year_built == 1995
    assert fields.owner_name == "CITY OF DURHAM"
    assert fields.apn == "0821-12-34-5678"


def test_market_value_falls_back_to_land_plus_improvement(normalizer):
    fields = normalizer.normalize({"landval": 50000, "impval": 20000})

    assert fields.assessed_value == 0
    assert fields.improvement_value == Decimal("20000")
    assert fields.market_value == Decimal("70000")


def test_market_value_markup_rounds_half_up(normalizer):
    assert normalizer.compute_market_value(Decimal("105"), Decimal(0), Decimal(0)) == Decimal("116")


def test_provider_market_value_does_not_override_markup(normalizer):
    fields = normalizer.normalize({"parval": 100000, "landval": 50000, "impval": 20000, "mktval": 500000})
    assert fields.market_value == Decimal("110000")


def test_provider_market_value_alone_is_not_a_usable_value(normalizer):
    with pytest.raises(NoComparableDataError):
        normalizer.normalize({"mktval": 250000, "marketval": 250000})


def test_acreage_preferred_over_square_feet():
    assert PropertyNormalizer.compute_lot_size({"ll_gisacre": 2.25, "ll_gissqft": 21780}) == Decimal("2.25")


def test_lot_size_absent_when_no_area_fields():
    assert PropertyNormalizer.compute_lot_size({"parval": 1}) is None


def test_non_numeric_value_treated_as_absent(normalizer):
    fields = normalizer.normalize({"parval": "N/A", "landval": 30000, "bldgval": 10000})
    assert fields.assessed_value == 0
    assert fields.market_value == Decimal("40000")


def test_defaults_for_missing_descriptive_fields(normalizer):
    fields = normalizer.normalize({"parval": 1000, "yearbuilt": 0})
    assert fields.property_type == "Unknown"
    assert fields.year_built is None
    assert fields.owner_name is None
    assert fields.lot_size is None


def test_all_values_zero_raises(normalizer):
    with pytest.raises(NoComparableDataError):
        normalizer.normalize({"parval": 0, "landval": None, "fields": {"usedesc": "Vacant"}})


def test_to_result_carries_request_id(normalizer, sample_parcel):
    result = normalizer.normalize(sample_parcel).to_result("req-1")
    assert result.request_id == "req-1"
    assert result.market_value == Decimal("110000")
