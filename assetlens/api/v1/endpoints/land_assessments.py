from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from assetlens.core.auth import get_anonymous_id, get_current_user_optional
from assetlens.core.dependencies import get_land_assessment_service, get_record_service, get_user_service
from assetlens.schemas.auth import CurrentUser
from assetlens.schemas.common import ApiResponse
from assetlens.schemas.land import LandAssessmentRequestCreate
from assetlens.services.land_assessment_service import LandAssessmentService
from assetlens.services.records_service import RecordService
from assetlens.services.user_service import UserService
from assetlens.utils.logging import get_logger
from assetlens.utils.responses import create_api_response, create_error_detail

LOGGER = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Assess a property",
    description="Look up a parcel by address and normalize its assessed and market values",
    operation_id="create_land_assessment",
)
async def create_land_assessment(
    request: Request,
    payload: LandAssessmentRequestCreate,
    current_user: Annotated[Optional[CurrentUser], Depends(get_current_user_optional)],
    anonymous_id: Annotated[Optional[str], Depends(get_anonymous_id)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    assessment_service: Annotated[LandAssessmentService, Depends(get_land_assessment_service)],
) -> ApiResponse:
    """Run a land assessment and record it in the caller's portfolio."""
    owner = await user_service.resolve_owner(current_user, anonymous_id)
    report = await assessment_service.execute(payload, owner)

    LOGGER.info(f"Land assessment completed: {report.request.id}")
    return create_api_response(
        data=report,
        message="Land assessment completed successfully",
        request=request,
    )


@router.get(
    "/{request_id}",
    response_model=ApiResponse,
    summary="Get a land assessment",
    operation_id="get_land_assessment",
)
async def get_land_assessment(
    request: Request,
    request_id: str,
    record_service: Annotated[RecordService, Depends(get_record_service)],
) -> ApiResponse:
    """Retrieve a stored land assessment by its request ID."""
    report = await record_service.get_land_report(request_id)
    if report is None:
        error_detail = create_error_detail(
            title="Land Assessment Not Found",
            status=status.HTTP_404_NOT_FOUND,
            detail=f"Land assessment with ID {request_id} not found",
            request=request,
        )
        raise HTTPException(status_code=404, detail=error_detail.model_dump(mode="json"))

    return create_api_response(
        data=report,
        message="Land assessment retrieved successfully",
        request=request,
    )
