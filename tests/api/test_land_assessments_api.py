from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import status

from assetlens.core.dependencies import get_land_assessment_service
from assetlens.main import app
from assetlens.services.land_assessment_service import LandAssessmentService

ADDRESS = {
    "street_address": "101 City Hall Plaza",
    "city": "Durham",
    "state": "NC",
    "zip_code": "27701",
    "lat": 35.9940,
    "lng": -78.8986,
}


@pytest.fixture
def mock_client(sample_parcel):
    client = Mock()
    client.search_address = AsyncMock(return_value=[sample_parcel])
    return client


@pytest.fixture
def assessment_service(app_store, mock_client):
    service = LandAssessmentService(app_store, client=mock_client, restrict_to_permitted_counties=True)
    app.dependency_overrides[get_land_assessment_service] = lambda: service
    return service


def test_create_land_assessment(test_client, assessment_service):
    response = test_client.post("/api/v1/land-assessments", json=ADDRESS)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()["data"]
    assert float(data["result"]["market_value"]) == 110000
    assert data["result"]["owner_name"] == "CITY OF DURHAM"
    assert data["property_info"]["address"] == "101 City Hall Plaza, Durham, NC 27701"
    assert "lat" not in data["request"]


def test_outside_permitted_counties_is_403(test_client, assessment_service, mock_client):
    response = test_client.post("/api/v1/land-assessments", json={**ADDRESS, "lat": 42.3601, "lng": -71.0589})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    mock_client.search_address.assert_not_called()


def test_unknown_address_is_422(test_client, assessment_service, mock_client):
    mock_client.search_address.return_value = []

    response = test_client.post("/api/v1/land-assessments", json=ADDRESS)

    assert response.status_code == 422
    assert mock_client.search_address.call_count == 2


def test_invalid_state_rejected(test_client, assessment_service):
    response = test_client.post("/api/v1/land-assessments", json={**ADDRESS, "state": "North Carolina"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_land_assessment(test_client, assessment_service):
    created = test_client.post("/api/v1/land-assessments", json=ADDRESS).json()["data"]

    response = test_client.get(f"/api/v1/land-assessments/{created['request']['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["result"] == created["result"]


def test_get_land_assessment_not_found(test_client, app_store):
    response = test_client.get("/api/v1/land-assessments/unknown-id")
    assert response.status_code == status.HTTP_404_NOT_FOUND
