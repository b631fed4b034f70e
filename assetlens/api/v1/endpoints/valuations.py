from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from assetlens.core.auth import get_anonymous_id, get_current_user_optional
from assetlens.core.dependencies import get_record_service, get_user_service, get_vehicle_valuation_service
from assetlens.schemas.auth import CurrentUser
from assetlens.schemas.common import ApiResponse
from assetlens.schemas.valuation import ValuationRequestCreate
from assetlens.services.records_service import RecordService
from assetlens.services.user_service import UserService
from assetlens.services.vehicle_valuation_service import VehicleValuationService
from assetlens.utils.logging import get_logger
from assetlens.utils.responses import create_api_response, create_error_detail

LOGGER = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Value a vehicle",
    description="Price a vehicle from comparable listings and estimate a loan against it",
    operation_id="create_vehicle_valuation",
)
async def create_valuation(
    request: Request,
    payload: ValuationRequestCreate,
    current_user: Annotated[Optional[CurrentUser], Depends(get_current_user_optional)],
    anonymous_id: Annotated[Optional[str], Depends(get_anonymous_id)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    valuation_service: Annotated[VehicleValuationService, Depends(get_vehicle_valuation_service)],
) -> ApiResponse:
    """Run a vehicle valuation and record it in the caller's portfolio."""
    owner = await user_service.resolve_owner(current_user, anonymous_id)
    report = await valuation_service.execute(payload, owner)

    LOGGER.info(f"Vehicle valuation completed: {report.request.id}")
    return create_api_response(
        data=report,
        message="Vehicle valuation completed successfully",
        request=request,
    )


@router.get(
    "/{request_id}",
    response_model=ApiResponse,
    summary="Get a vehicle valuation",
    operation_id="get_vehicle_valuation",
)
async def get_valuation(
    request: Request,
    request_id: str,
    record_service: Annotated[RecordService, Depends(get_record_service)],
) -> ApiResponse:
    """Retrieve a stored vehicle valuation by its request ID."""
    report = await record_service.get_valuation_report(request_id)
    if report is None:
        error_detail = create_error_detail(
            title="Valuation Not Found",
            status=status.HTTP_404_NOT_FOUND,
            detail=f"Valuation with ID {request_id} not found",
            request=request,
        )
        raise HTTPException(status_code=404, detail=error_detail.model_dump(mode="json"))

    return create_api_response(
        data=report,
        message="Vehicle valuation retrieved successfully",
        request=request,
    )
