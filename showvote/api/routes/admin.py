"""Catalog administration endpoint.

POST /api/admin/shows inserts a show into the catalog. The endpoint is
unauthenticated; deployments are expected to keep it off public networks.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from structlog import get_logger

from showvote.api.dependencies.voting import get_show_catalog_service
from showvote.api.models.errors import ErrorResponse
from showvote.api.models.show import AddShowRequest, ShowResponse
from showvote.application.services.show_catalog_service import ShowCatalogService
from showvote.domain.errors.catalog import InvalidShowDataError

router = APIRouter(prefix="/api/admin", tags=["admin"])

logger = get_logger()


@router.post(
    "/shows",
    response_model=ShowResponse,
    response_model_by_alias=True,
    status_code=201,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def add_show(
    request: AddShowRequest,
    service: ShowCatalogService = Depends(get_show_catalog_service),
) -> ShowResponse | Response:
    """Add a show to the catalog.

    Returns:
        The stored show with 201.

    Raises:
        422: Title or description blank after trimming.
    """
    try:
        show = await service.add_show(
            title=request.title,
            description=request.description,
            image_url=request.image_url,
            genre=request.genre,
        )
        return ShowResponse.from_domain(show)

    except InvalidShowDataError as e:
        return JSONResponse(status_code=422, content={"error": str(e)})

    except Exception as e:
        logger.exception("add_show_failed", error_type=type(e).__name__)
        return JSONResponse(status_code=500, content={"error": str(e)})
