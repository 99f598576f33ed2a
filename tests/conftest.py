"""
Pytest configuration and shared fixtures for the job search tests.
"""

from datetime import datetime, timezone

import pytest

from job_search.models import JobRecord


# Fixed "now" so age filters are deterministic: 2025-06-15T12:00:00Z
NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc).timestamp()


def make_job(title="Engineer", company="Acme", location="Remote", **fields):
    """Build a JobRecord with sensible defaults for tests."""
    return JobRecord(title=title, company=company, location=location, **fields)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def job_factory():
    return make_job


@pytest.fixture
def sample_jobs():
    """
    Five jobs across three companies.

    Returns:
        list[JobRecord]: Jobs in a deliberately unsorted order
    """
    return [
        make_job(
            "Senior Frontend Engineer", "Acme", "New York, NY",
            id="1", posted_at="2025-06-14T09:00:00Z",
            salary_summary="$145K-$175K", experience="5 years",
        ),
        make_job(
            "Backend Engineer", "Globex", "Remote",
            id="2", posted_at="2025-06-01",
            salary_summary="$150K", experience="3-5 years",
        ),
        make_job(
            "frontend developer", "Acme", "San Francisco, CA",
            id="3", posted_at="2025-05-01T00:00:00",
            salary_summary="{'unit': 'USD', 'amount': '160000.0'}",
        ),
        make_job(
            "Data Scientist", "Initech", "Austin, TX",
            id="4", posted_at=None, experience="2-4 years",
        ),
        make_job(
            "Account Manager", "Acme", "Remote",
            id="5", posted_at="not a date", salary_summary="competitive",
        ),
    ]


@pytest.fixture
def sample_csv():
    """
    CSV snapshot text in the format produced by the ingestion pipeline.

    Contains one row without coordinates and one duplicate (same ats_id,
    newer posted_at) that should win deduplication.
    """
    return (
        "url,title,location,company,ats_id,id,lat,lon,salary_currency,salary_period,"
        "salary_summary,experience,posted_at,ats_type\n"
        "https://jobs.example.com/1,Frontend Engineer,Remote,Acme,a-1,,40.7,-74.0,USD,year,"
        "$120K-$150K,3 years,2025-06-01,greenhouse\n"
        "https://jobs.example.com/2,Backend Engineer,Berlin,Globex,g-2,,52.5,13.4,,,"
        ",,2025-06-02,lever\n"
        "https://jobs.example.com/3,No Coords,Nowhere,Acme,a-3,,,,,,,,,\n"
        "https://jobs.example.com/1,Frontend Engineer II,Remote,Acme,a-1,,40.7,-74.0,USD,year,"
        "$130K-$160K,3 years,2025-06-10,greenhouse\n"
    )
