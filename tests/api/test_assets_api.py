import asyncio
from decimal import Decimal

from fastapi import status

from assetlens.schemas.assets import AssetType, UserAssetCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate

GUEST = {"X-Anonymous-Id": "tab-7"}


async def seed_vehicle(store, user_id=None):
    request = await store.create_valuation_request(
        ValuationRequestCreate(make="Subaru", model="Outback", year=2021, mileage=30000, zip_code="46204")
    )
    await store.create_valuation_result(
        ValuationResultCreate(request_id=request.id, private_party_value=Decimal("24000"))
    )
    if user_id:
        await store.create_user_asset(UserAssetCreate(user_id=user_id, asset_type=AssetType.VEHICLE, asset_id=request.id))
    return request


def guest_id(test_client):
    # Any portfolio call creates the guest on first use
    return test_client.get("/api/v1/dashboard", headers=GUEST).json()["data"]["user"]["id"]


def test_portfolio_requires_identity(test_client, app_store):
    assert test_client.get("/api/v1/dashboard").status_code == status.HTTP_401_UNAUTHORIZED
    assert test_client.get("/api/v1/assets").status_code == status.HTTP_401_UNAUTHORIZED


def test_empty_dashboard(test_client, app_store):
    response = test_client.get("/api/v1/dashboard", headers=GUEST)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["user"]["name"] == "Guest"
    assert data["assets"] == []
    assert data["total_value"] == "$0"


def test_dashboard_with_dangling_asset(test_client, app_store):
    user_id = guest_id(test_client)
    asyncio.run(app_store.create_user_asset(UserAssetCreate(user_id=user_id, asset_type=AssetType.VEHICLE, asset_id="gone")))
    asyncio.run(seed_vehicle(app_store, user_id))

    data = test_client.get("/api/v1/dashboard", headers=GUEST).json()["data"]

    assert data["total_value"] == "$24,000"
    assert data["vehicle_count"] == 1
    assert data["property_count"] == 0
    assert len(data["assets"]) == 1


def test_list_assets(test_client, app_store):
    user_id = guest_id(test_client)
    request = asyncio.run(seed_vehicle(app_store, user_id))

    response = test_client.get("/api/v1/assets", headers=GUEST)

    items = response.json()["data"]["items"]
    assert [(item["type"], item["request_id"], item["value"]) for item in items] == [
        ("vehicle", request.id, "$24,000")
    ]


def test_add_asset_with_custom_name(test_client, app_store):
    request = asyncio.run(seed_vehicle(app_store))

    response = test_client.post(
        "/api/v1/assets",
        json={"asset": {"asset_type": "vehicle", "request_id": request.id}, "custom_name": "Family car"},
        headers=GUEST,
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["data"]["name"] == "Family car"


def test_add_asset_unknown_report(test_client, app_store):
    response = test_client.post(
        "/api/v1/assets",
        json={"asset": {"asset_type": "property", "request_id": "missing"}},
        headers=GUEST,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_add_asset_unknown_type_rejected(test_client, app_store):
    response = test_client.post(
        "/api/v1/assets",
        json={"asset": {"asset_type": "boat", "request_id": "x"}},
        headers=GUEST,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
