"""Facet helpers for filter pick-lists (companies, locations)."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Tuple

from .models import JobRecord


def _distinct(values: Iterable[str]) -> List[str]:
    return sorted({v.strip() for v in values if v and v.strip()})


def unique_companies(jobs: Sequence[JobRecord]) -> List[str]:
    """Distinct, trimmed, non-empty company names in sorted order."""
    return _distinct(job.company for job in jobs)


def unique_locations(jobs: Sequence[JobRecord]) -> List[str]:
    """Distinct, trimmed, non-empty locations in sorted order."""
    return _distinct(job.location for job in jobs)


def company_job_counts(jobs: Sequence[JobRecord]) -> List[Tuple[str, int]]:
    """(company, number of jobs) pairs sorted by company name."""
    counts = Counter(job.company.strip() for job in jobs if job.company and job.company.strip())
    return sorted(counts.items(), key=lambda item: (item[0].casefold(), item[0]))


def filter_values(values: Sequence[str], text: str) -> List[str]:
    """Narrow a pick-list to values containing `text` (case-insensitive)."""
    needle = (text or "").lower()
    if not needle:
        return list(values)
    return [v for v in values if needle in v.lower()]
