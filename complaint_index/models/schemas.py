from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ComplaintSearchRequest(BaseModel):
    """Search for stored complaints about an item."""

    item_name: str | None = Field(default=None, description="Product name used to build the query vector")
    query_string: str | None = Field(
        default=None,
        description="Free-text description; accepted but not used to build the query vector",
    )
    max_results: int = Field(default=10, gt=0, description="Top-K sent to the index")


class ComplaintSearchResult(BaseModel):
    """Ids of stored complaints that passed the relevance threshold, in index order."""

    item_name: str | None = None
    complains: List[str] = Field(default_factory=list)


__all__ = ["ComplaintSearchRequest", "ComplaintSearchResult"]
