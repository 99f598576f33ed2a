"""CSV snapshot source backed by a file on disk.

Parsed jobs are cached per instance and reused while the file's mtime is
unchanged and the TTL has not expired.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from ..models import JobRecord
from .base import JobSource, parse_jobs_csv

logger = logging.getLogger(__name__)


class CsvFileSource(JobSource):
    """Load jobs from a CSV file, caching by path + mtime with a TTL."""

    name = "csv_file"

    def __init__(self, path: Union[str, Path], ttl_s: float = 300.0) -> None:
        self._path = Path(path).expanduser().resolve()
        self._ttl_s = ttl_s
        self._cached: Optional[List[JobRecord]] = None
        self._cached_mtime: float = 0.0
        self._cached_at: float = 0.0

    @property
    def path(self) -> Path:
        return self._path

    def _mtime(self) -> float:
        try:
            return self._path.stat().st_mtime
        except OSError:
            return 0.0

    def invalidate(self) -> None:
        """Drop the cached collection so the next fetch re-reads the file."""
        self._cached = None

    def fetch(self) -> List[JobRecord]:
        if not self._path.exists():
            raise FileNotFoundError(f"CSV file not found: {self._path}")

        mtime = self._mtime()
        now = time.monotonic()
        if (
            self._cached is not None
            and mtime == self._cached_mtime
            and (now - self._cached_at) < self._ttl_s
        ):
            logger.debug("Cache hit for %s", self._path)
            return list(self._cached)

        csv_text = self._path.read_text(encoding="utf-8")
        jobs = parse_jobs_csv(csv_text)

        self._cached = jobs
        self._cached_mtime = mtime
        self._cached_at = now
        logger.info("Loaded %d jobs from %s", len(jobs), self._path)
        return list(jobs)
