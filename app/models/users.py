from pydantic import BaseModel, Field
from typing import List


class UserResponse(BaseModel):
    """Single user lookup, echoing the path parameter."""
    user_id: str = Field(..., description="User ID exactly as given in the path")
    message: str = "User retrieved successfully"


class UserPostsResponse(BaseModel):
    """User posts listing with the applied filters."""
    user_id: str = Field(..., description="User ID exactly as given in the path")
    category: str = Field(default="all", description="Post category filter")
    sort: str = Field(default="date", description="Sort order")
    posts: List[str] = Field(default_factory=list, description="Placeholder, always empty")
