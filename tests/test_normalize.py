"""
Tests for salary/experience extraction, date parsing and CSV row conversion.
"""

import math
from datetime import datetime, timezone

import pytest

from job_search.normalize import (
    compare_key,
    get_experience_value,
    get_salary_value,
    has_coordinates,
    job_from_row,
    normalize_for_search,
    parse_posted_at,
)


class TestSalaryValue:
    @pytest.mark.parametrize(
        "summary,expected",
        [
            ("$145K-$175K", 145000),
            ("145,000-175,000", 145000),
            ("€90k – €110k", 90000),
            ("$200,000—$300,000", 200000),
            ("$150K", 150000.5),
            ("130,900", 130900.5),
            ("£75000", 75000.5),
            ("{'unit': 'USD', 'amount': '160000.0'}", 160000.5),
            ('{"unit": "EUR", "amount": "98000"}', 98000.5),
        ],
    )
    def test_values(self, summary, expected):
        assert get_salary_value(summary) == pytest.approx(expected)

    @pytest.mark.parametrize("summary", [None, "", "competitive", "DOE", "{'unit': 'USD'}"])
    def test_unknown_is_minus_one(self, summary):
        assert get_salary_value(summary) == -1

    def test_descending_order(self):
        summaries = ["$145K-$175K", "$150K", "{'unit':'USD','amount':'160000.0'}", None]
        ordered = sorted(summaries, key=get_salary_value, reverse=True)
        assert ordered == ["{'unit':'USD','amount':'160000.0'}", "$150K", "$145K-$175K", None]

    def test_range_sorts_before_single_value_with_same_minimum(self):
        assert get_salary_value("$145K") > get_salary_value("$145K-$175K")


class TestExperienceValue:
    @pytest.mark.parametrize(
        "experience,expected",
        [("3-5 years", 3), ("5 years", 5), ("10+ yrs", 10), ("Entry level, 0 years", 0)],
    )
    def test_first_number(self, experience, expected):
        assert get_experience_value(experience) == expected

    @pytest.mark.parametrize("experience", [None, "", "senior"])
    def test_unknown_is_infinity(self, experience):
        assert get_experience_value(experience) == math.inf

    def test_ascending_order(self):
        values = ["5 years", None, "2-4 years"]
        assert sorted(values, key=get_experience_value) == ["2-4 years", "5 years", None]

    def test_long_digit_run_sorts_last_without_raising(self):
        huge = "1" * 5000 + " years"
        assert get_experience_value(huge) == math.inf
        assert sorted([huge, "5 years"], key=get_experience_value) == ["5 years", huge]


class TestPostedAt:
    def test_iso_with_z(self):
        expected = datetime(2025, 6, 14, 9, 0, tzinfo=timezone.utc).timestamp()
        assert parse_posted_at("2025-06-14T09:00:00Z") == expected

    def test_date_only_and_naive_are_utc(self):
        expected = datetime(2025, 6, 1, tzinfo=timezone.utc).timestamp()
        assert parse_posted_at("2025-06-01") == expected
        assert parse_posted_at("2025-06-01T00:00:00") == expected

    def test_offset(self):
        expected = datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc).timestamp()
        assert parse_posted_at("2025-06-01T12:00:00+02:00") == expected

    @pytest.mark.parametrize("value", [None, "", "  ", "not a date", "2025-13-45"])
    def test_unparsable_is_none(self, value):
        assert parse_posted_at(value) is None

    @pytest.mark.parametrize("value", [datetime(2025, 6, 1, tzinfo=timezone.utc), 1717200000])
    def test_non_string_is_none(self, value):
        assert parse_posted_at(value) is None


def test_text_keys():
    assert normalize_for_search("  Senior ENGINEER ") == "senior engineer"
    assert compare_key("  Straße ") == "strasse"
    assert compare_key("Électricité") == "electricite"
    assert sorted(["Zillow", "Électricité", "amazon"], key=compare_key) == ["amazon", "Électricité", "Zillow"]


class TestJobFromRow:
    def test_full_row(self):
        job = job_from_row({
            "url": "https://jobs.example.com/1",
            "title": " Frontend Engineer ",
            "company": "Acme",
            "location": "Remote",
            "ats_id": "a-1",
            "id": "",
            "lat": "40.7",
            "lon": "-74.0",
            "lng": "999",
            "salary_summary": "$120K-$150K",
            "experience": "",
            "posted_at": "2025-06-01",
        })
        assert job.title == "Frontend Engineer"
        assert job.id == "a-1"
        assert job.lat == pytest.approx(40.7)
        assert job.lng == pytest.approx(-74.0)
        assert job.experience is None
        assert has_coordinates(job)

    def test_missing_values(self):
        job = job_from_row({"url": "https://jobs.example.com/9", "lat": "abc", "lng": None})
        assert job.title == ""
        assert job.id == "https://jobs.example.com/9"
        assert job.ats_id is None
        assert not has_coordinates(job)

    def test_lng_fallback_and_non_finite(self):
        assert job_from_row({"lat": 1.5, "lng": "2.5"}).lng == 2.5
        assert job_from_row({"lat": "nan", "lng": "2.5"}).lat is None
