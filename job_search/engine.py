"""Job collection query engine.

`run_query` is a pure function of its inputs: it parses the search text,
filters by age, facets, company, location and free text, then sorts. Input
records are never modified; per-query projections (lowercased fields,
timestamps, salary and experience values) are built on the fly and dropped
when the call returns.

`JobQueryEngine` binds a validated `SearchConfig` and an injected job source
so UI layers only pass the user's input.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .config import (
    FuzzyThresholds,
    SearchConfig,
    validate_age_filter,
    validate_sort_key,
    validate_threshold,
)
from .fuzzy import fuzzy_match_unchecked
from .models import FacetFilters, JobRecord, ParsedSearch, SearchResult
from .normalize import compare_key, get_experience_value, get_salary_value, parse_posted_at
from .query_parser import MAX_AGE_DAYS, parse_search_text
from .sources.base import JobSource

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class _Projection:
    """Request-scoped derived values for one job."""

    job: JobRecord
    timestamp: Optional[float]


def _project(jobs: Sequence[JobRecord]) -> List[_Projection]:
    return [_Projection(job=job, timestamp=parse_posted_at(job.posted_at)) for job in jobs]


def _sort_recent(rows: List[_Projection]) -> List[_Projection]:
    # Newest first, unknown dates last; sorted() keeps ties in input order.
    return sorted(
        rows,
        key=lambda r: (r.timestamp is None, -(r.timestamp or 0.0)),
    )


def _sort_by_text(attr: str) -> Callable[[List[_Projection]], List[_Projection]]:
    def _sort(rows: List[_Projection]) -> List[_Projection]:
        return sorted(rows, key=lambda r: compare_key(getattr(r.job, attr)))

    return _sort


def _sort_experience(rows: List[_Projection]) -> List[_Projection]:
    return sorted(rows, key=lambda r: get_experience_value(r.job.experience))


def _sort_salary(rows: List[_Projection]) -> List[_Projection]:
    return sorted(rows, key=lambda r: -get_salary_value(r.job.salary_summary))


SORTERS: Dict[str, Callable[[List[_Projection]], List[_Projection]]] = {
    "title": _sort_by_text("title"),
    "company": _sort_by_text("company"),
    "location": _sort_by_text("location"),
    "recent": _sort_recent,
    "experience": _sort_experience,
    "salary": _sort_salary,
}


def _validate_thresholds(thresholds: FuzzyThresholds) -> FuzzyThresholds:
    validate_threshold(thresholds.company, "company threshold")
    validate_threshold(thresholds.location, "location threshold")
    validate_threshold(thresholds.general, "general threshold")
    return thresholds


def _apply_facets(rows: List[_Projection], facets: FacetFilters) -> List[_Projection]:
    if facets.companies:
        companies = {c.strip().casefold() for c in facets.companies}
        rows = [r for r in rows if r.job.company.strip().casefold() in companies]
    if facets.locations:
        locations = {loc.strip().casefold() for loc in facets.locations}
        rows = [r for r in rows if r.job.location.strip().casefold() in locations]
    return rows


def _matches_general(job: JobRecord, text: str, threshold: float) -> bool:
    return (
        fuzzy_match_unchecked(job.title, text, threshold)
        or fuzzy_match_unchecked(job.company, text, threshold)
        or fuzzy_match_unchecked(job.location, text, threshold)
    )


def run_query(
    jobs: Sequence[JobRecord],
    search_text: Optional[str] = "",
    sort_by: str = "title",
    age_filter_days: Optional[int] = None,
    *,
    thresholds: Optional[FuzzyThresholds] = None,
    facets: Optional[FacetFilters] = None,
    now: Optional[float] = None,
) -> SearchResult:
    """Filter and sort `jobs` for one search.

    Args:
        jobs: The current job collection. Not modified.
        search_text: Raw user input, may contain @age/@company/@location tags.
        sort_by: One of title, company, location, recent, experience, salary.
        age_filter_days: Explicit age filter; an @age tag in the text wins.
        thresholds: Fuzzy thresholds per field (defaults 0.95/0.85/0.75).
        facets: Optional explicit company/location selections.
        now: POSIX time used for the age cutoff (defaults to time.time()).

    Returns:
        SearchResult with the ordered jobs and the parsed search.

    Raises:
        ConfigurationError: on an unknown sort key, a threshold outside
            [0, 1] or a negative age filter.
    """
    sorter = SORTERS[validate_sort_key(sort_by)]
    age_filter_days = validate_age_filter(age_filter_days)
    thresholds = _validate_thresholds(thresholds or FuzzyThresholds())

    parsed: ParsedSearch = parse_search_text(search_text)
    rows = _project(jobs)

    age = parsed.age if parsed.age is not None else age_filter_days
    if age is not None:
        current = time.time() if now is None else now
        cutoff = current - min(age, MAX_AGE_DAYS) * SECONDS_PER_DAY
        rows = [r for r in rows if r.timestamp is not None and r.timestamp >= cutoff]

    if facets is not None and not facets.is_empty:
        rows = _apply_facets(rows, facets)

    if parsed.company:
        rows = [r for r in rows if fuzzy_match_unchecked(r.job.company, parsed.company, thresholds.company)]

    if parsed.location:
        rows = [r for r in rows if fuzzy_match_unchecked(r.job.location, parsed.location, thresholds.location)]

    if parsed.general_search:
        rows = [r for r in rows if _matches_general(r.job, parsed.general_search, thresholds.general)]

    ordered = [r.job for r in sorter(rows)]

    logger.debug(
        "query %r sort=%s age=%s -> %d of %d jobs",
        search_text,
        sort_by,
        age,
        len(ordered),
        len(jobs),
    )
    return SearchResult(jobs=ordered, parsed=parsed, total=len(jobs))


def query_jobs(
    jobs: Sequence[JobRecord],
    search_text: Optional[str] = "",
    sort_by: str = "title",
    age_filter_days: Optional[int] = None,
    *,
    thresholds: Optional[FuzzyThresholds] = None,
    facets: Optional[FacetFilters] = None,
    now: Optional[float] = None,
) -> List[JobRecord]:
    """Like `run_query` but returns only the ordered jobs."""
    return run_query(
        jobs,
        search_text,
        sort_by,
        age_filter_days,
        thresholds=thresholds,
        facets=facets,
        now=now,
    ).jobs


class JobQueryEngine:
    """Runs searches against an injected job source with configured defaults."""

    def __init__(self, config: Optional[SearchConfig] = None, source: Optional[JobSource] = None) -> None:
        self._config = config or SearchConfig()
        self._source = source

    @property
    def config(self) -> SearchConfig:
        return self._config

    def search(
        self,
        search_text: Optional[str] = "",
        sort_by: Optional[str] = None,
        age_filter_days: Optional[int] = None,
        facets: Optional[FacetFilters] = None,
        jobs: Optional[Sequence[JobRecord]] = None,
        now: Optional[float] = None,
    ) -> SearchResult:
        """Search `jobs`, or the source's current collection when `jobs` is None."""
        if jobs is None:
            if self._source is None:
                raise ValueError("No job source configured; pass jobs explicitly")
            jobs = self._source.fetch()

        return run_query(
            jobs,
            search_text,
            self._config.sort_by if sort_by is None else sort_by,
            age_filter_days if age_filter_days is not None else self._config.age_filter_days,
            thresholds=self._config.fuzzy_thresholds,
            facets=facets,
            now=now,
        )
