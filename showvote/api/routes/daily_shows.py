"""Daily slate endpoint.

GET /api/daily-shows returns today's slate, drawing it on the first request
of the day. The caller's anonymous identity cookie is issued here when
missing so the later vote is attributed to the same viewer.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from structlog import get_logger

from showvote.api.dependencies.identity import (
    attach_identity_cookie,
    get_voter_identity,
)
from showvote.api.dependencies.voting import (
    get_daily_selection_service,
    get_identity_config,
)
from showvote.api.models.errors import ErrorResponse
from showvote.api.models.show import ShowResponse
from showvote.application.ports.identity_issuer import VoterIdentity
from showvote.application.services.daily_selection_service import (
    DailySelectionService,
)
from showvote.config.identity_config import IdentityConfig

router = APIRouter(prefix="/api", tags=["daily-shows"])

logger = get_logger()


@router.get(
    "/daily-shows",
    response_model=list[ShowResponse],
    response_model_by_alias=True,
    responses={500: {"model": ErrorResponse}},
)
async def get_daily_shows(
    identity: VoterIdentity = Depends(get_voter_identity),
    service: DailySelectionService = Depends(get_daily_selection_service),
    identity_config: IdentityConfig = Depends(get_identity_config),
) -> list[ShowResponse] | Response:
    """Return today's slate in its stored order."""
    try:
        shows = await service.get_todays_shows()
        return [ShowResponse.from_domain(show) for show in shows]

    except Exception as e:
        logger.exception("daily_shows_failed", error_type=type(e).__name__)
        response = JSONResponse(status_code=500, content={"error": str(e)})
        attach_identity_cookie(response, identity, identity_config)
        return response
