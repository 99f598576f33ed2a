"""Job data sources."""

from .base import JobSource, parse_jobs_csv
from .csv_file import CsvFileSource
from .enriched import EnrichedSource, enrich_job
from .http_csv import HttpCsvSource

__all__ = [
    "CsvFileSource",
    "EnrichedSource",
    "HttpCsvSource",
    "JobSource",
    "enrich_job",
    "parse_jobs_csv",
]
