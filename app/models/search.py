from pydantic import BaseModel, Field
from typing import List


class SearchResponse(BaseModel):
    """Search echo response; paging values stay strings."""
    query: str = Field(..., description="Search query")
    limit: str = Field(default="10", description="Maximum results per page")
    page: str = Field(default="1", description="Page number")
    results: List[str] = Field(default_factory=list, description="Placeholder, always empty")
