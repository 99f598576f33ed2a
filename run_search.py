"""CLI entry point.

This script loads the jobs snapshot, runs one search, and writes the ordered
results as JSON (or prints a short listing).

Examples:
    python run_search.py --csv public/jobs.csv --search "@company:Acme frontend"
    python run_search.py --csv public/jobs.csv --sort salary --age 7 --out results.json
    python run_search.py --url https://example.com --path jobs.csv --company Acme --company Globex

The output is a list of dicts (serialized Pydantic models).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from job_search.config import SearchConfig, load_config
from job_search.engine import JobQueryEngine
from job_search.errors import ConfigurationError
from job_search.logging_config import setup_logging
from job_search.models import FacetFilters, SORT_KEYS
from job_search.sources.base import JobSource
from job_search.sources.csv_file import CsvFileSource
from job_search.sources.http_csv import HttpCsvSource

logger = logging.getLogger("run_search")


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search and sort a job listings snapshot.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--csv", type=str, help="Path to the jobs CSV snapshot.")
    src.add_argument("--url", type=str, help="Base URL serving the jobs CSV.")
    p.add_argument("--path", type=str, default="jobs.csv", help="CSV path under --url.")
    p.add_argument("--search", type=str, default="", help="Search text; supports @age:, @company:, @location:.")
    p.add_argument("--sort", type=str, default=None, choices=SORT_KEYS, help="Sort order (default from config).")
    p.add_argument("--age", type=int, default=None, help="Only jobs posted within this many days.")
    p.add_argument("--company", action="append", default=[], help="Exact company filter (repeatable).")
    p.add_argument("--location", action="append", default=[], help="Exact location filter (repeatable).")
    p.add_argument("--config", type=str, default=None, help="YAML config file with search defaults.")
    p.add_argument("--limit", type=int, default=20, help="Max jobs to output.")
    p.add_argument("--out", type=str, default=None, help="Write results to this JSON file.")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level.")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines.")
    return p.parse_args(argv)


def build_source(args: argparse.Namespace) -> JobSource:
    if args.csv:
        return CsvFileSource(args.csv)
    return HttpCsvSource(args.url, args.path)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, json_logs=args.json_logs)

    try:
        config = load_config(args.config) if args.config else SearchConfig()
        engine = JobQueryEngine(config, build_source(args))
        result = engine.search(
            args.search,
            sort_by=args.sort,
            age_filter_days=args.age,
            facets=FacetFilters(companies=args.company, locations=args.location),
        )
    except (ConfigurationError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 2

    jobs = result.jobs[: max(args.limit, 0)]

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        data = [j.model_dump(mode="json") for j in jobs]
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote {len(data)} of {len(result.jobs)} matching jobs to: {out_path}")
    else:
        for job in jobs:
            print(f"{job.title} | {job.company} | {job.location} | {job.salary_summary or '-'}")
        print(f"{len(result.jobs)} of {result.total} jobs match", file=sys.stderr)

    if result.parsed.general_search:
        print(f"Free-text search: {result.parsed.general_search}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
