"""Base classes for job data sources."""

from __future__ import annotations

import csv
import io
import logging
from abc import ABC, abstractmethod
from typing import List

from ..models import JobRecord
from ..normalize import has_coordinates, job_from_row
from ..utils import dedupe_jobs

logger = logging.getLogger(__name__)


class JobSource(ABC):
    """Abstract base class for a job source.

    The engine only needs `fetch()`; caching, transport and enrichment stay
    behind this boundary.
    """

    name: str

    @abstractmethod
    def fetch(self) -> List[JobRecord]:
        """Return the current job collection."""
        raise NotImplementedError


def parse_jobs_csv(csv_text: str) -> List[JobRecord]:
    """Parse CSV snapshot text into deduplicated, map-placeable JobRecords.

    Rows without finite coordinates are dropped.
    """
    reader = csv.DictReader(io.StringIO(csv_text))
    jobs: List[JobRecord] = []
    skipped = 0
    for row in reader:
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue
        job = job_from_row(row)
        if not has_coordinates(job):
            skipped += 1
            continue
        jobs.append(job)

    deduped = dedupe_jobs(jobs)
    if skipped:
        logger.debug("Skipped %d rows without coordinates", skipped)
    logger.info("Parsed %d jobs (%d after dedupe)", len(jobs), len(deduped))
    return deduped
