from decimal import Decimal

import pytest

from assetlens.schemas.assets import AssetType, UserAssetCreate
from assetlens.schemas.auth import UserCreate, UserUpdate
from assetlens.schemas.land import LandAssessmentRequestCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate


@pytest.mark.asyncio
async def test_create_request_assigns_id_and_timestamp(memory_store):
    request = await memory_store.create_valuation_request(
        ValuationRequestCreate(make="Toyota", model="Camry", year=2019, mileage=45000, zip_code="02134")
    )

    assert request.id
    assert request.created_at is not None
    assert request.zip_code == "02134"
    assert await memory_store.get_valuation_request(request.id) is request


@pytest.mark.asyncio
async def test_ids_are_unique(memory_store):
    data = ValuationRequestCreate(make="Ford", model="F-150", year=2020, mileage=1, zip_code="75201")
    first = await memory_store.create_valuation_request(data)
    second = await memory_store.create_valuation_request(data)
    assert first.id != second.id


@pytest.mark.asyncio
async def test_result_lookup_by_request(memory_store):
    assert await memory_store.get_valuation_result_for_request("missing") is None

    result = await memory_store.create_valuation_result(
        ValuationResultCreate(request_id="req-1", private_party_value=Decimal("12000"))
    )
    assert await memory_store.get_valuation_result_for_request("req-1") is result


@pytest.mark.asyncio
async def test_land_request_drops_coordinates(memory_store):
    request = await memory_store.create_land_request(
        LandAssessmentRequestCreate(
            street_address="101 City Hall Plaza", city="Durham", state="NC", lat=35.99, lng=-78.90
        )
    )
    assert not hasattr(request, "lat")
    assert request.zip_code is None


@pytest.mark.asyncio
async def test_user_assets_listed_in_insertion_order(memory_store):
    for asset_id in ("a", "b", "c"):
        await memory_store.create_user_asset(
            UserAssetCreate(user_id="u1", asset_type=AssetType.VEHICLE, asset_id=asset_id)
        )
    await memory_store.create_user_asset(
        UserAssetCreate(user_id="u2", asset_type=AssetType.PROPERTY, asset_id="z")
    )

    assets = await memory_store.list_user_assets("u1")
    assert [asset.asset_id for asset in assets] == ["a", "b", "c"]
    assert assets[0].asset_type == "vehicle"


@pytest.mark.asyncio
async def test_user_create_and_update(memory_store):
    user = await memory_store.create_user(UserCreate(email="jane@example.com", name="Jane"))
    assert await memory_store.get_user_by_email("jane@example.com") is user

    updated = await memory_store.update_user(user.id, UserUpdate(name="Jane D.", google_id="g-1"))
    assert updated.name == "Jane D."
    assert updated.email == "jane@example.com"
    assert await memory_store.get_user_by_google_id("g-1") is user
    assert await memory_store.update_user("missing", UserUpdate(name="x")) is None
