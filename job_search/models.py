"""Data models for the search engine.

Job records are frozen: the engine reads them, sorts references to them, and
never writes back. Everything derived during a query (lowercased fields,
timestamps, salary values) lives in request-scoped projections instead.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field


SortKey = Literal["title", "company", "location", "recent", "experience", "salary"]

SORT_KEYS = get_args(SortKey)


class JobRecord(BaseModel):
    """A job posting as loaded from the CSV snapshot.

    Only `title`, `company`, `location`, `posted_at`, `salary_summary` and
    `experience` take part in search and sorting. The remaining fields are
    carried through for sources, dedup and enrichment.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    company: str = ""
    location: str = ""

    id: str = ""
    ats_id: Optional[str] = None
    url: str = ""

    posted_at: Optional[str] = Field(
        default=None,
        description="ISO-8601-ish posting date; unparsable values mean 'unknown recency'.",
    )
    salary_summary: Optional[str] = Field(
        default=None,
        description="Free-text salary, e.g. '$145K-$175K' or \"{'unit': 'USD', 'amount': '140900.0'}\".",
    )
    salary_currency: Optional[str] = None
    salary_period: Optional[str] = None
    experience: Optional[str] = Field(default=None, description="Free-text experience, e.g. '3-5 years'.")

    lat: Optional[float] = None
    lng: Optional[float] = None
    ats_type: Optional[str] = None
    description: Optional[str] = None


class ParsedSearch(BaseModel):
    """Structured view of one raw search string."""

    model_config = ConfigDict(frozen=True)

    age: Optional[int] = None
    company: Optional[str] = None
    location: Optional[str] = None
    general_search: str = ""


class FacetFilters(BaseModel):
    """Explicit company/location selections from a filter dialog.

    Empty lists mean no restriction.
    """

    model_config = ConfigDict(frozen=True)

    companies: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.companies and not self.locations


class SearchResult(BaseModel):
    """Ordered search output plus the parsed query for display."""

    model_config = ConfigDict(frozen=True)

    jobs: List[JobRecord] = Field(default_factory=list)
    parsed: ParsedSearch = Field(default_factory=ParsedSearch)
    total: int = Field(default=0, description="Size of the collection before filtering.")
