from unittest.mock import AsyncMock, patch

import pytest

from assetlens.services.providers.regrid_client import (
    RegridClient,
    build_alternate_query,
    build_primary_query,
    extract_parcels,
    strip_unit_designators,
)


def test_primary_query_includes_zip():
    assert build_primary_query("101 Main St", "Durham", "NC", "27701") == "101 Main St, Durham, NC 27701"
    assert build_primary_query("101 Main St", "Durham", "NC") == "101 Main St, Durham, NC"


@pytest.mark.parametrize(
    "street, expected",
    [
        ("101 Main St Apt 4B", "101 Main St"),
        ("101 Main St, Suite 200", "101 Main St"),
        ("101 Main St #12", "101 Main St"),
        ("101 Main St Unit 7", "101 Main St"),
        ("101 Main St", "101 Main St"),
    ],
)
def test_strip_unit_designators(street, expected):
    assert strip_unit_designators(street) == expected


def test_alternate_query_drops_unit_and_zip():
    assert build_alternate_query("55 Elm Ave Apt 3", "Dallas", "TX") == "55 Elm Ave, Dallas, TX"


def test_extract_parcels_v2_shape(sample_parcel):
    payload = {"parcels": {"type": "FeatureCollection", "features": [{"properties": sample_parcel}]}}
    assert extract_parcels(payload) == [sample_parcel]


def test_extract_parcels_v1_shape():
    payload = {"results": [{"properties": {"parval": 1}}, {"geometry": {}}]}
    assert extract_parcels(payload) == [{"parval": 1}]


def test_extract_parcels_empty():
    assert extract_parcels({"parcels": {"features": []}}) == []
    assert extract_parcels({}) == []
    assert extract_parcels(None) == []


@pytest.mark.asyncio
async def test_search_address(sample_parcel):
    client = RegridClient(api_token="rg-token", base_url="https://regrid.test/api/v2")
    payload = {"parcels": {"features": [{"properties": sample_parcel}]}}

    with patch.object(client, "get_json", new=AsyncMock(return_value=payload)) as mock_get:
        parcels = await client.search_address("101 City Hall Plaza, Durham, NC")

    assert parcels == [sample_parcel]
    mock_get.assert_called_once_with(
        "/parcels/address",
        params={"query": "101 City Hall Plaza, Durham, NC", "token": "rg-token", "limit": 1},
    )


def test_street_words_resembling_designators_are_kept():
    assert strip_unit_designators("9 Flower Street") == "9 Flower Street"
    assert strip_unit_designators("12 United Ave") == "12 United Ave"
