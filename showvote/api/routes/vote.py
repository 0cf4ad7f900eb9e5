"""Vote submission endpoint.

POST /api/vote records one vote per anonymous viewer per day.

Status mapping:
- 201: vote recorded
- 400: show is not in today's slate
- 403: voting closed, or already voted today
- 422: malformed body
- 500: anything else
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from structlog import get_logger

from showvote.api.dependencies.identity import (
    attach_identity_cookie,
    get_voter_identity,
)
from showvote.api.dependencies.voting import get_identity_config, get_voting_service
from showvote.api.models.errors import ErrorResponse
from showvote.api.models.vote import VoteRequest, VoteResponse
from showvote.application.ports.identity_issuer import VoterIdentity
from showvote.application.services.voting_service import VotingService
from showvote.config.identity_config import IdentityConfig
from showvote.domain.errors.voting import (
    AlreadyVotedError,
    InvalidShowError,
    VotingClosedError,
)

router = APIRouter(prefix="/api", tags=["vote"])

logger = get_logger()


@router.post(
    "/vote",
    response_model=VoteResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_vote(
    request: VoteRequest,
    identity: VoterIdentity = Depends(get_voter_identity),
    service: VotingService = Depends(get_voting_service),
    identity_config: IdentityConfig = Depends(get_identity_config),
) -> VoteResponse | Response:
    """Record the caller's vote for a show in today's slate.

    Args:
        request: Ballot with the chosen showId.
        identity: Caller's anonymous identity (cookie).
        service: Injected voting service.
        identity_config: Cookie settings for error responses.

    Returns:
        VoteResponse with 201, or an error body.
    """
    try:
        await service.submit_vote(show_id=request.show_id, user_id=identity.user_id)
        return VoteResponse()

    except (VotingClosedError, AlreadyVotedError) as e:
        status_code = 403
        error = str(e)

    except InvalidShowError as e:
        status_code = 400
        error = str(e)

    except Exception as e:
        logger.exception("vote_submission_failed", error_type=type(e).__name__)
        status_code = 500
        error = str(e)

    response = JSONResponse(status_code=status_code, content={"error": error})
    attach_identity_cookie(response, identity, identity_config)
    return response
