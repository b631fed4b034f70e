from unittest.mock import AsyncMock, Mock

import pytest

from assetlens.database.models import UserAsset, ValuationRequest
from assetlens.repositories.sql_store import SQLStore
from assetlens.schemas.assets import AssetType, UserAssetCreate
from assetlens.schemas.valuation import ValuationRequestCreate


@pytest.fixture
def mock_session():
    session = Mock()
    session.add = Mock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_create_valuation_request_persists_model(mock_session):
    store = SQLStore(mock_session)

    request = await store.create_valuation_request(
        ValuationRequestCreate(make="Toyota", model="Camry", year=2019, mileage=45000, zip_code="02134")
    )

    assert isinstance(request, ValuationRequest)
    assert request.id
    mock_session.add.assert_called_once_with(request)
    mock_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_user_asset_type_stored_as_text(mock_session):
    store = SQLStore(mock_session)

    asset = await store.create_user_asset(
        UserAssetCreate(user_id="u1", asset_type=AssetType.PROPERTY, asset_id="req-9", custom_name="Lake lot")
    )

    assert isinstance(asset, UserAsset)
    assert asset.asset_type == "property"
    assert asset.custom_name == "Lake lot"


@pytest.mark.asyncio
async def test_list_user_assets_is_not_truncated(mock_session):
    assets = [UserAsset(id=f"a{i}", user_id="u1", asset_type="vehicle", asset_id=f"req-{i}") for i in range(750)]
    result = Mock()
    result.scalars.return_value.all.return_value = assets
    mock_session.execute.return_value = result
    store = SQLStore(mock_session)

    listed = await store.list_user_assets("u1")

    assert len(listed) == 750
    query = mock_session.execute.await_args.args[0]
    assert "LIMIT" not in str(query).upper()
    assert "user_assets.user_id" in str(query)
