import logging
from fastapi import APIRouter, Request

from app.core.exceptions import MissingQueryParameterError
from app.core.query import default_query, first_query_value, query_parameter
from app.models.error import ErrorResponse
from app.models.search import SearchResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing search query"}},
    openapi_extra={"parameters": [
        query_parameter("q", "Search query", required=True),
        query_parameter("limit", "Maximum results per page", default="10"),
        query_parameter("page", "Page number", default="1"),
    ]},
    tags=["Search"]
)
async def search(request: Request) -> SearchResponse:
    """
    Demonstrates query parameters.

    - **q**: search query (required, must be non-empty)
    - **limit**: results per page, defaults to `10`
    - **page**: page number, defaults to `1`

    `limit` and `page` are echoed as strings, not parsed.
    """
    query = first_query_value(request.query_params, "q")
    limit = default_query(request.query_params, "limit", "10")
    page = default_query(request.query_params, "page", "1")

    if not query:
        raise MissingQueryParameterError("q")

    logger.debug(f"Search for '{query}' (limit={limit}, page={page})")

    return SearchResponse(
        query=query,
        limit=limit,
        page=page,
        results=[]  # Placeholder for actual search results
    )
