"""System endpoints exposing health and info."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from src.application.dtos.health_dto import ApplicationInfoDTO, HealthReportDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthReportUseCase,
)
from src.domain.entities.health import HealthStatus
from src.presentation.dependencies import provide
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthReportDTO,
    responses={
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": HealthReportDTO,
            "description": "At least one critical check is unhealthy",
        }
    },
)
async def health(
    response: Response,
    tag: Optional[List[str]] = Query(
        None, description="Only run checks carrying one of these tags"
    ),
    get_health_report_use_case: GetHealthReportUseCase = Depends(
        provide("get_health_report_use_case")
    ),
) -> HealthReportDTO:
    """Run the registered health checks and return the aggregated report."""
    try:
        report = await get_health_report_use_case.execute(tags=tag)
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve health status",
        ) from exc

    if report.status is HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    logger.debug("health.check.success", status=report.status.value)
    return report


@router.get("/health/live", response_model=HealthReportDTO)
async def liveness() -> HealthReportDTO:
    """Report that the process is up without running any checks."""
    return HealthReportDTO(status=HealthStatus.HEALTHY, total_duration=0.0)


@router.get("/info", response_model=ApplicationInfoDTO)
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        provide("get_application_info_use_case")
    ),
) -> ApplicationInfoDTO:
    """Return strategic information about the application."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        info_response = await get_application_info_use_case.execute(started_at)
        logger.debug("info.retrieved", status=info_response.status.value)
        return info_response
    except Exception as exc:
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc
