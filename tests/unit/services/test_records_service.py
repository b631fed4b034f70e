from datetime import datetime, timezone
from decimal import Decimal

import pytest

from assetlens.schemas.land import LandAssessmentRequestCreate, LandAssessmentResultCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate
from assetlens.services.records_service import RecordService


@pytest.fixture
def records(memory_store):
    return RecordService(memory_store)


@pytest.mark.asyncio
async def test_valuation_report_display_strings(records):
    request = await records.create_valuation_request(
        ValuationRequestCreate(make="Toyota", model="Camry", year=2019, mileage=45000, zip_code="02134")
    )
    result = await records.create_valuation_result(
        ValuationResultCreate(request_id=request.id, private_party_value=Decimal("12000"))
    )
    result.created_at = datetime(2026, 10, 19, tzinfo=timezone.utc)

    report = await records.get_valuation_report(request.id)

    assert report.request.id == request.id
    assert report.result.private_party_value == Decimal("12000")
    assert report.vehicle_info.summary == "2019 Toyota Camry"
    assert report.vehicle_info.mileage == "45,000 miles"
    assert report.vehicle_info.location == "ZIP 02134"
    assert report.report_info.date == "Oct 19, 2026"


@pytest.mark.asyncio
async def test_repeated_reads_are_identical(records):
    request = await records.create_valuation_request(
        ValuationRequestCreate(make="Honda", model="Civic", year=2018, mileage=0, zip_code="75201")
    )
    await records.create_valuation_result(ValuationResultCreate(request_id=request.id))

    assert await records.get_valuation_report(request.id) == await records.get_valuation_report(request.id)


@pytest.mark.asyncio
async def test_request_without_result_is_not_found(records):
    request = await records.create_valuation_request(
        ValuationRequestCreate(make="Honda", model="Civic", year=2018, mileage=1000, zip_code="75201")
    )
    assert await records.get_valuation_report(request.id) is None
    assert await records.get_valuation_report("missing") is None


@pytest.mark.asyncio
async def test_land_report_display_strings(records):
    request = await records.create_land_request(
        LandAssessmentRequestCreate(street_address="101 City Hall Plaza", city="Durham", state="NC", zip_code="27701")
    )
    await records.create_land_result(
        LandAssessmentResultCreate(
            request_id=request.id,
            market_value=Decimal("110000"),
            property_type="Single Family Residential",
            lot_size=Decimal("0.5"),
        )
    )

    report = await records.get_land_report(request.id)

    assert report.property_info.address == "101 City Hall Plaza, Durham, NC 27701"
    assert report.property_info.location == "Durham, NC"
    assert report.property_info.summary == "Single Family Residential · 21,780 sq ft"


@pytest.mark.asyncio
async def test_land_request_without_result_is_not_found(records):
    request = await records.create_land_request(
        LandAssessmentRequestCreate(street_address="1 Main St", city="Dallas", state="TX")
    )
    assert await records.get_land_report(request.id) is None
