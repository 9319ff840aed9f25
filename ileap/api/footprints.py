"""
Product footprints API router.

Read-only PACT v2 footprint listing over the demo data generated at startup.
"""
import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from ileap.pydantic_models.api import (
    BadRequest,
    ErrorResponse,
    NoSuchFootprint,
    NotImplementedResponse,
    PfListingResponse,
    ProductFootprintResponse,
)
from ileap.pydantic_models.scalars import PfId
from ileap.services.exceptions import OffsetOutOfRangeError
from ileap.services.pagination import paginate

router = APIRouter(
    prefix="/2/footprints",
    tags=["Footprints"],
)

logger = logging.getLogger(__name__)

LISTING_PATH = "/2/footprints"


def default_limit(request: Request) -> int:
    return request.app.state.config.section("pagination").get("default_limit", 10)


def error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump())


@router.get(
    "",
    response_model=PfListingResponse,
    responses={
        400: {"model": BadRequest},
        501: {"model": NotImplementedResponse},
    },
)
async def list_footprints(
    request: Request,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    """
    List product footprints.

    Args:
        limit: Maximum number of footprints to return
        offset: Number of footprints to skip

    A ``link`` header points at the next page when more footprints remain.
    """
    if "$filter" in request.query_params:
        logger.warning("Rejecting footprint listing with $filter")
        return error_response(
            status.HTTP_501_NOT_IMPLEMENTED, NotImplementedResponse()
        )

    footprints = request.app.state.footprints
    try:
        page = paginate(footprints, limit or default_limit(request), offset)
    except OffsetOutOfRangeError as e:
        logger.warning(str(e))
        return error_response(status.HTTP_400_BAD_REQUEST, BadRequest())

    response = JSONResponse(
        content={"data": [pf.model_dump(mode="json") for pf in page.items]}
    )
    link = page.link_header(str(request.base_url), LISTING_PATH)
    if link:
        response.headers["link"] = link
    return response


@router.get(
    "/{footprint_id}",
    response_model=ProductFootprintResponse,
    responses={
        400: {"model": BadRequest},
        404: {"model": NoSuchFootprint},
    },
)
async def get_footprint(footprint_id: str, request: Request):
    """
    Get a product footprint by id.

    Malformed ids are rejected by ``PfId.parse`` and answered with 400.
    """
    pf_id = PfId.parse(footprint_id)
    footprint = next(
        (pf for pf in request.app.state.footprints if pf.id == pf_id), None
    )

    if footprint is None:
        logger.warning(f"Footprint {pf_id} not found")
        return error_response(status.HTTP_404_NOT_FOUND, NoSuchFootprint())

    return JSONResponse(content={"data": footprint.model_dump(mode="json")})
