from unittest.mock import AsyncMock, patch

import pytest

from assetlens.core.exceptions import ConfigurationError
from assetlens.schemas.valuation import ValuationRequestCreate
from assetlens.services.providers.marketcheck_client import MarketCheckClient


@pytest.fixture
def vehicle():
    return ValuationRequestCreate(make="Toyota", model="Camry", year=2019, mileage=45000, zip_code="02134")


@pytest.fixture
def client():
    return MarketCheckClient(
        api_key="mc-key",
        base_url="https://mc.test/v2",
        radius_miles=100,
        mileage_window=15000,
        max_listings=50,
        retry_delay=0,
    )


def test_build_params(client, vehicle):
    params = client.build_params(vehicle)

    assert params["api_key"] == "mc-key"
    assert params["make"] == "Toyota"
    assert params["year"] == 2019
    assert params["zip"] == "02134"
    assert params["radius"] == 100
    assert params["miles_range"] == "30000-60000"
    assert params["rows"] == 50


def test_mileage_range_floors_at_zero(client):
    vehicle = ValuationRequestCreate(make="Honda", model="Fit", year=2024, mileage=500, zip_code="75201")
    assert client.build_params(vehicle)["miles_range"] == "0-15500"


@pytest.mark.asyncio
async def test_search_listings(client, vehicle):
    payload = {"num_found": 2, "listings": [{"price": 18000}, {"price": 19500}, "garbage"]}

    with patch.object(client, "get_json", new=AsyncMock(return_value=payload)) as mock_get:
        listings = await client.search_listings(vehicle)

    assert listings == [{"price": 18000}, {"price": 19500}]
    endpoint = mock_get.call_args.args[0]
    assert endpoint == "/search/car/active"


@pytest.mark.asyncio
async def test_missing_listings_array_is_empty(client, vehicle):
    with patch.object(client, "get_json", new=AsyncMock(return_value={"num_found": 0})):
        assert await client.search_listings(vehicle) == []


@pytest.mark.asyncio
async def test_missing_key_fails_before_request(vehicle):
    client = MarketCheckClient(api_key="", base_url="https://mc.test/v2")

    with patch.object(client, "get_json", new=AsyncMock()) as mock_get:
        with pytest.raises(ConfigurationError):
            await client.search_listings(vehicle)

    mock_get.assert_not_called()
