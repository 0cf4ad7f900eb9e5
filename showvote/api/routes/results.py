"""Results endpoint.

GET /api/results returns today's ranking once the reveal hour has passed.
Before that it answers 403 with the reveal time in availableAt.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from structlog import get_logger

from showvote.api.dependencies.voting import get_results_service
from showvote.api.models.errors import ErrorResponse, ResultsNotYetAvailableResponse
from showvote.api.models.results import ShowResultResponse
from showvote.application.services.results_service import ResultsService
from showvote.domain.errors.results import (
    NoSelectionTodayError,
    ResultsNotYetAvailableError,
)

router = APIRouter(prefix="/api", tags=["results"])

logger = get_logger()


@router.get(
    "/results",
    response_model=list[ShowResultResponse],
    response_model_by_alias=True,
    responses={
        403: {"model": ResultsNotYetAvailableResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_results(
    service: ResultsService = Depends(get_results_service),
) -> list[ShowResultResponse] | Response:
    """Return today's vote counts, highest first."""
    try:
        results = await service.get_results()
        return [ShowResultResponse.from_domain(result) for result in results]

    except ResultsNotYetAvailableError as e:
        body = ResultsNotYetAvailableResponse(error=str(e), available_at=e.available_at)
        return JSONResponse(
            status_code=403,
            content=body.model_dump(mode="json", by_alias=True),
        )

    except NoSelectionTodayError as e:
        return JSONResponse(status_code=404, content={"error": str(e)})

    except Exception as e:
        logger.exception("results_failed", error_type=type(e).__name__)
        return JSONResponse(status_code=500, content={"error": str(e)})
