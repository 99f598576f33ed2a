"""Enrichment wrapper around another source.

Some fields (description, ATS type, a more precise posted_at) live in a
separate store keyed by job URL. The lookup is best effort: a failing or
empty lookup leaves the CSV record as it was, and so does a patch that does
not validate as a JobRecord.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..models import JobRecord
from .base import JobSource

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[Mapping[str, Any]]]

ENRICHABLE_FIELDS = ("description", "ats_type", "posted_at")


def _patch_value(value: Any) -> Any:
    # Stores hand back datetime columns; records carry ISO strings.
    if isinstance(value, date):
        return value.isoformat()
    return value


def enrich_job(job: JobRecord, lookup: Lookup) -> JobRecord:
    """Return `job` patched with the lookup result, or `job` itself."""
    if not job.url:
        return job
    try:
        patch = lookup(job.url)
    except Exception:  # noqa: BLE001
        logger.warning("Enrichment lookup failed for %s", job.url, exc_info=True)
        return job

    if not patch:
        return job

    update: Dict[str, Any] = {k: _patch_value(patch[k]) for k in ENRICHABLE_FIELDS if patch.get(k)}
    if not update:
        return job
    try:
        return JobRecord.model_validate({**job.model_dump(), **update})
    except ValidationError as exc:
        logger.warning("Ignoring invalid enrichment for %s: %s", job.url, exc)
        return job


class EnrichedSource(JobSource):
    """Apply `lookup` patches to every job fetched from `inner`."""

    name = "enriched"

    def __init__(self, inner: JobSource, lookup: Lookup) -> None:
        self._inner = inner
        self._lookup = lookup

    def fetch(self) -> List[JobRecord]:
        return [enrich_job(job, self._lookup) for job in self._inner.fetch()]
