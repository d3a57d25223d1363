"""Pydantic models for structured service responses."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """One page of search results as returned by the search route.

    The total hit count has been named ``nbHits``, ``totalHits`` and
    ``estimatedTotalHits`` across service versions; one of them must be present.
    """

    model_config = ConfigDict(extra="allow")

    hits: List[Dict[str, Any]] = Field(default_factory=list)
    offset: int = 0
    limit: int = 20
    total_hits: int = Field(
        validation_alias=AliasChoices("nbHits", "totalHits", "estimatedTotalHits", "total_hits"),
    )
    processing_time_ms: float = Field(
        default=0.0,
        validation_alias=AliasChoices("processingTimeMs", "processing_time_ms"),
    )
    query: str = ""
