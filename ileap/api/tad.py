"""
iLEAP transport activity data API router.
"""
import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from ileap.pydantic_models.api import BadRequest, TadListingResponse
from ileap.services.exceptions import OffsetOutOfRangeError
from ileap.services.pagination import paginate
from ileap.services.tad_filter import filter_tads

router = APIRouter(
    prefix="/2/ileap",
    tags=["Transport Activity Data"],
)

logger = logging.getLogger(__name__)

TAD_PATH = "/2/ileap/tad"
PAGINATION_PARAMS = {"limit", "offset"}


def attribute_filters(request: Request) -> dict[str, list[str]]:
    """Every query parameter other than limit and offset, with all its values."""
    filters: dict[str, list[str]] = {}
    for name, value in request.query_params.multi_items():
        if name not in PAGINATION_PARAMS:
            filters.setdefault(name, []).append(value)
    return filters


@router.get(
    "/tad",
    response_model=TadListingResponse,
    responses={400: {"model": BadRequest}},
)
async def list_tads(
    request: Request,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    """
    List transport activity data, optionally filtered by attribute.

    Any other query parameter, e.g. ``mode=Road`` or ``origin.city=Basel``,
    filters the records. A record matches when one of its attributes whose
    name contains the parameter equals one of the given values, ignoring
    case. Records matching any filter are returned.
    """
    filters = attribute_filters(request)
    tads = filter_tads(request.app.state.tads, filters)

    limit = limit or request.app.state.config.section("pagination").get(
        "default_limit", 10
    )
    try:
        page = paginate(tads, limit, offset)
    except OffsetOutOfRangeError as e:
        logger.warning(str(e))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=BadRequest().model_dump()
        )

    response = JSONResponse(
        content={"data": [tad.model_dump(mode="json") for tad in page.items]}
    )
    link = page.link_header(str(request.base_url), TAD_PATH, filters)
    if link:
        response.headers["link"] = link
    return response
