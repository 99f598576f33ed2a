"""CSV snapshot source fetched over HTTP.

Used where the snapshot is served as a static asset rather than read from
the local filesystem. HTTP 429 responses are retried with exponential
backoff; any other HTTP error propagates to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

import httpx

from ..models import JobRecord
from .base import JobSource, parse_jobs_csv

logger = logging.getLogger(__name__)


class HttpCsvSource(JobSource):
    """Fetch the jobs CSV from `base_url` + `path` and parse it."""

    name = "http_csv"

    def __init__(
        self,
        base_url: str,
        path: str,
        timeout_s: float = 20.0,
        max_retries: int = 3,
        backoff_s: float = 2.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
        self._timeout = timeout_s
        self._max_retries = max_retries
        self._backoff_s = backoff_s
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    def _get(self, client: httpx.Client) -> httpx.Response:
        retries = 0
        while True:
            try:
                resp = client.get(self._url)
                resp.raise_for_status()
                return resp
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == 429 and retries < self._max_retries:
                    sleep_s = self._backoff_s * (2**retries)
                    logger.warning("Rate limited by %s, retrying in %.1fs", self._url, sleep_s)
                    time.sleep(sleep_s)
                    retries += 1
                    continue
                raise

    def fetch(self) -> List[JobRecord]:
        with httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            resp = self._get(client)

        jobs = parse_jobs_csv(resp.text)
        logger.info("Fetched %d jobs from %s", len(jobs), self._url)
        return jobs
