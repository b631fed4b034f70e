"""Request/result persistence and the combined report views."""

from typing import Optional

from assetlens.database.models import (
    LandAssessmentRequest,
    LandAssessmentResult,
    ValuationRequest,
    ValuationResult,
)
from assetlens.repositories.store import BaseStore
from assetlens.schemas.land import (
    LandAssessmentRequestCreate,
    LandAssessmentRequestRead,
    LandAssessmentResponse,
    LandAssessmentResultCreate,
    LandAssessmentResultRead,
    PropertyInfo,
)
from assetlens.schemas.valuation import (
    ReportInfo,
    ValuationRequestCreate,
    ValuationRequestRead,
    ValuationResponse,
    ValuationResultCreate,
    ValuationResultRead,
    VehicleInfo,
)
from assetlens.utils.formatting import format_acres, format_mileage, format_report_date
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


def vehicle_summary(request: ValuationRequest) -> str:
    return f"{request.year} {request.make} {request.model}"


def property_summary(request: LandAssessmentRequest, result: LandAssessmentResult) -> str:
    property_type = result.property_type or "Unknown"
    if result.lot_size is None:
        return property_type
    return f"{property_type} · {format_acres(result.lot_size)}"


def full_address(request: LandAssessmentRequest) -> str:
    address = f"{request.street_address}, {request.city}, {request.state}"
    return f"{address} {request.zip_code}" if request.zip_code else address


class RecordService:
    """Creates requests and results and assembles their combined views.

    A missing request or a request without a result is reported as ``None``;
    callers decide whether that is a 404 or a skipped dashboard row.
    """

    def __init__(self, store: BaseStore):
        self.store = store

    # Vehicle

    async def create_valuation_request(self, data: ValuationRequestCreate) -> ValuationRequest:
        request = await self.store.create_valuation_request(data)
        LOGGER.info(f"Created valuation request {request.id}")
        return request

    async def create_valuation_result(self, data: ValuationResultCreate) -> ValuationResult:
        result = await self.store.create_valuation_result(data)
        LOGGER.info(f"Created valuation result {result.id} for request {result.request_id}")
        return result

    async def get_valuation_report(self, request_id: str) -> Optional[ValuationResponse]:
        request = await self.store.get_valuation_request(request_id)
        if request is None:
            return None
        result = await self.store.get_valuation_result_for_request(request_id)
        if result is None:
            LOGGER.info(f"Valuation request {request_id} has no result")
            return None
        return self.build_valuation_report(request, result)

    @staticmethod
    def build_valuation_report(request: ValuationRequest, result: ValuationResult) -> ValuationResponse:
        return ValuationResponse(
            request=ValuationRequestRead.model_validate(request),
            result=ValuationResultRead.model_validate(result),
            vehicle_info=VehicleInfo(
                summary=vehicle_summary(request),
                mileage=format_mileage(request.mileage),
                location=f"ZIP {request.zip_code}",
            ),
            report_info=ReportInfo(date=format_report_date(result.created_at)),
        )

    # Property

    async def create_land_request(self, data: LandAssessmentRequestCreate) -> LandAssessmentRequest:
        request = await self.store.create_land_request(data)
        LOGGER.info(f"Created land assessment request {request.id}")
        return request

    async def create_land_result(self, data: LandAssessmentResultCreate) -> LandAssessmentResult:
        result = await self.store.create_land_result(data)
        LOGGER.info(f"Created land assessment result {result.id} for request {result.request_id}")
        return result

    async def get_land_report(self, request_id: str) -> Optional[LandAssessmentResponse]:
        request = await self.store.get_land_request(request_id)
        if request is None:
            return None
        result = await self.store.get_land_result_for_request(request_id)
        if result is None:
            LOGGER.info(f"Land assessment request {request_id} has no result")
            return None
        return self.build_land_report(request, result)

    @staticmethod
    def build_land_report(request: LandAssessmentRequest, result: LandAssessmentResult) -> LandAssessmentResponse:
        return LandAssessmentResponse(
            request=LandAssessmentRequestRead.model_validate(request),
            result=LandAssessmentResultRead.model_validate(result),
            property_info=PropertyInfo(
                summary=property_summary(request, result),
                address=full_address(request),
                location=f"{request.city}, {request.state}",
            ),
            report_info=ReportInfo(date=format_report_date(result.created_at)),
        )
