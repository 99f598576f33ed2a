"""Utility helpers shared across the engine."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from .models import JobRecord
from .normalize import parse_posted_at


def dedupe_key(job: JobRecord) -> str:
    """Identity used to collapse duplicate rows of the same posting."""
    return job.ats_id or job.id or job.url or f"{job.company}-{job.title}-{job.location}"


def dedupe_jobs(jobs: Iterable[JobRecord]) -> List[JobRecord]:
    """Collapse duplicates, keeping the most recently posted copy.

    Output order follows the first time each key was seen.
    """
    by_key: Dict[str, JobRecord] = {}
    for job in jobs:
        key = dedupe_key(job)
        existing = by_key.get(key)
        if existing is None:
            by_key[key] = job
            continue

        existing_ts = parse_posted_at(existing.posted_at)
        candidate_ts = parse_posted_at(job.posted_at)
        if (candidate_ts if candidate_ts is not None else -math.inf) > (
            existing_ts if existing_ts is not None else -math.inf
        ):
            by_key[key] = job

    return list(by_key.values())

