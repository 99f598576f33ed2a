"""
Tests for facet pick-list helpers.
"""

from job_search.facets import company_job_counts, filter_values, unique_companies, unique_locations


def test_unique_companies_and_locations(job_factory):
    jobs = [
        job_factory(company=" Globex ", location="Remote"),
        job_factory(company="Acme", location="Berlin"),
        job_factory(company="Acme", location=" Remote"),
        job_factory(company="", location=""),
    ]
    assert unique_companies(jobs) == ["Acme", "Globex"]
    assert unique_locations(jobs) == ["Berlin", "Remote"]


def test_company_job_counts(sample_jobs):
    assert company_job_counts(sample_jobs) == [("Acme", 3), ("Globex", 1), ("Initech", 1)]


def test_filter_values():
    values = ["Acme", "Globex", "Initech"]
    assert filter_values(values, "") == values
    assert filter_values(values, "EX") == ["Globex"]
    assert filter_values(values, "zzz") == []
