"""Health check endpoints."""

from fastapi import APIRouter, Depends, status

from acronym_service.acronyms import AcronymExtension, SourceError
from acronym_service.config import settings
from acronym_service.dependencies import get_extension
from acronym_service.logging_config import get_logger
from acronym_service.schemas.health import HealthResponse

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    description=(
        "Returns service health status including whether the acronym document "
        "can be fetched. This endpoint does NOT use the /api/v1 prefix."
    ),
    responses={
        200: {
            "description": "Service is healthy or degraded",
            "content": {
                "application/json": {
                    "examples": {
                        "healthy": {
                            "summary": "Acronym document reachable",
                            "value": {
                                "status": "ok",
                                "version": "0.1.0",
                                "source": "available",
                            },
                        },
                        "degraded": {
                            "summary": "Acronym document unavailable",
                            "value": {
                                "status": "degraded",
                                "version": "0.1.0",
                                "source": "unavailable",
                            },
                        },
                    }
                }
            },
        }
    },
)
def health_check(
    extension: AcronymExtension = Depends(get_extension),
) -> HealthResponse:
    """Health check endpoint.

    Always answers 200. A missing or unreachable acronym document is reported
    as "degraded" rather than as an error, since lookups keep working (and
    simply find nothing) in that state.

    Args:
        extension: Acronym extension (injected by FastAPI)

    Returns:
        HealthResponse with current service status
    """
    source_status = "unavailable"
    try:
        extension.source.fetch(extension.config.source_page)
        source_status = "available"
    except SourceError as e:
        logger.warning("health.source_unavailable", error=str(e))

    return HealthResponse(
        status="ok" if source_status == "available" else "degraded",
        version=settings.app_version,
        source=source_status,
    )
