from fastapi import APIRouter, Request

from app.core.query import default_query, query_parameter
from app.models.users import UserResponse, UserPostsResponse

router = APIRouter()


@router.get("/user/{user_id}", response_model=UserResponse, tags=["Users"])
async def get_user(user_id: str) -> UserResponse:
    """
    Demonstrates path parameters.

    The ID is echoed back verbatim; it is not checked for format.
    """
    return UserResponse(user_id=user_id)


@router.get(
    "/user/{user_id}/posts",
    response_model=UserPostsResponse,
    openapi_extra={"parameters": [
        query_parameter("category", "Post category filter", default="all"),
        query_parameter("sort", "Sort order", default="date"),
    ]},
    tags=["Users"]
)
async def get_user_posts(user_id: str, request: Request) -> UserPostsResponse:
    """
    Combines a path parameter with optional query parameters.

    - **category**: post category, defaults to `all`
    - **sort**: sort order, defaults to `date`
    """
    return UserPostsResponse(
        user_id=user_id,
        category=default_query(request.query_params, "category", "all"),
        sort=default_query(request.query_params, "sort", "date"),
        posts=[]  # Placeholder for actual posts
    )
