"""
Tests for Levenshtein distance and similarity ratio.
"""

import pytest

from job_search.similarity import levenshtein_distance, similarity_ratio


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("openai", "openai", 0),
    ],
)
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_empty_strings_are_identical():
    assert similarity_ratio("", "") == 1.0


def test_identical_strings():
    for s in ["a", "OpenAI", "senior frontend engineer", "日本語"]:
        assert similarity_ratio(s, s) == 1.0


def test_ratio_formula():
    # kitten -> sitting: distance 3, max length 7
    assert similarity_ratio("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    assert similarity_ratio("abc", "") == 0.0


def test_bounds_and_symmetry():
    pairs = [
        ("acme", "acne"),
        ("remote", "remote (us)"),
        ("x", "a much longer string"),
        ("C++", "c#"),
    ]
    for a, b in pairs:
        ratio = similarity_ratio(a, b)
        assert 0.0 <= ratio <= 1.0
        assert ratio == similarity_ratio(b, a)


def test_case_sensitive():
    assert similarity_ratio("OpenAI", "openai") < 1.0
