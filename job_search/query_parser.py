"""Structured search text parsing.

Search input may carry field-scoped tags next to free text:

    @age:7 @company:OpenAI @location:"New York" senior engineer

Tags are extracted in a fixed order (age, company, location), each from the
text left over by the previous extraction. Only the first occurrence of each
tag is honored; repeats stay in the free-text remainder as literal text.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .models import ParsedSearch


AGE_RE = re.compile(r"@age:(\d+)", flags=re.IGNORECASE)

# Larger ages are clamped; at this size the cutoff already keeps every dated job.
MAX_AGE_DAYS = 1_000_000

# A value is a quoted phrase or one whitespace-free token that stops short of
# the next "@tag:".
_VALUE = r"""(?:"([^"]*)"|'([^']*)'|((?:(?!@\w+:)\S)+))"""

COMPANY_RE = re.compile(r"@company:" + _VALUE, flags=re.IGNORECASE)
LOCATION_RE = re.compile(r"@location:" + _VALUE, flags=re.IGNORECASE)


def _strip_span(text: str, match: "re.Match[str]") -> str:
    return f"{text[:match.start()]} {text[match.end():]}"


def _extract_value(text: str, pattern: "re.Pattern[str]") -> Tuple[Optional[str], str]:
    """Pull the first `pattern` value out of `text`.

    Returns the trimmed value (None if absent or blank) and the remaining text.
    A blank value leaves the text untouched.
    """
    match = pattern.search(text)
    if not match:
        return None, text

    quoted = match.group(1) if match.group(1) is not None else match.group(2)
    if quoted is not None:
        value = quoted.strip()
    else:
        # Unbalanced quote: `@company:"Acme Corp` takes the bare token `Acme`.
        value = match.group(3).lstrip("\"'").strip()
    if not value:
        return None, text
    return value, _strip_span(text, match)


def _extract_age(text: str) -> Tuple[Optional[int], str]:
    match = AGE_RE.search(text)
    if not match:
        return None, text
    digits = match.group(1).lstrip("0") or "0"
    age = MAX_AGE_DAYS if len(digits) > len(str(MAX_AGE_DAYS)) else min(int(digits), MAX_AGE_DAYS)
    return age, _strip_span(text, match)


def parse_search_text(raw: Optional[str]) -> ParsedSearch:
    """Split raw search input into `@age`, `@company`, `@location` and free text."""
    if not raw or not raw.strip():
        return ParsedSearch()

    text = raw
    age, text = _extract_age(text)
    company, text = _extract_value(text, COMPANY_RE)
    location, text = _extract_value(text, LOCATION_RE)

    general = " ".join(text.split())

    return ParsedSearch(
        age=age,
        company=company,
        location=location,
        general_search=general,
    )
