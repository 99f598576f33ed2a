"""Normalization & heuristics.

This module contains deterministic parsing logic:
- salary and experience strings -> sortable numbers
- posted_at strings -> timestamps
- text keys for searching and case-insensitive comparison
- raw CSV rows -> JobRecord

None of these raise on dirty data. Anything that cannot be parsed maps to a
sentinel that sorts last (`-1` for salary, `inf` for experience, `None` for
dates), which keeps the search experience resilient to upstream noise.
"""

from __future__ import annotations

import math
import re
import unicodedata
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .models import JobRecord


UNKNOWN_SALARY = -1.0
UNKNOWN_EXPERIENCE = math.inf

# Single values sort after ranges that share the same minimum.
SINGLE_VALUE_OFFSET = 0.5

CURRENCY_RE = re.compile(r"[$€£¥₹]")
DIGITS_RE = re.compile(r"\d+")
DICT_AMOUNT_RE = re.compile(
    r"""'amount':\s*['"]([^'"]+)['"]|"amount":\s*['"]([^'"]+)['"]""",
    flags=re.IGNORECASE,
)
SALARY_RANGE_RE = re.compile(r"([\d,]+)\s*K?\s*[-–—]\s*([\d,]+)\s*K?", flags=re.IGNORECASE)
SALARY_SINGLE_RE = re.compile(r"([\d,]+)\s*K?", flags=re.IGNORECASE)
K_SUFFIX_RE = re.compile(r"k", flags=re.IGNORECASE)


def _to_float(value: str) -> Optional[float]:
    try:
        number = float(value.replace(",", ""))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def get_experience_value(experience: Optional[str]) -> float:
    """First run of digits as years ("3-5 years" -> 3); unknown -> inf."""
    if not experience:
        return UNKNOWN_EXPERIENCE
    match = DIGITS_RE.search(experience)
    # float() has no digit limit; absurd runs become inf and sort with unknowns.
    return float(match.group(0)) if match else UNKNOWN_EXPERIENCE


def get_salary_value(salary_summary: Optional[str]) -> float:
    """Sortable salary value; higher is better, unknown -> -1.

    - dict-like "{'unit': 'USD', 'amount': '140900.0'}" -> amount + 0.5
    - range "145K-175K" -> lower bound (145000), no offset
    - single "150K" / "130,900" -> amount + 0.5

    The 0.5 offset only exists to order a single value after a range with
    the same minimum; it is not meant for display.
    """
    if not salary_summary:
        return UNKNOWN_SALARY

    normalized = CURRENCY_RE.sub("", salary_summary)

    dict_match = DICT_AMOUNT_RE.search(normalized)
    if dict_match:
        amount = _to_float(dict_match.group(1) or dict_match.group(2) or "")
        if amount is not None:
            return amount + SINGLE_VALUE_OFFSET

    range_match = SALARY_RANGE_RE.search(normalized)
    if range_match:
        minimum = _to_float(range_match.group(1))
        if minimum is not None:
            if K_SUFFIX_RE.search(range_match.group(0)):
                minimum *= 1000
            return minimum

    single_match = SALARY_SINGLE_RE.search(normalized)
    if single_match:
        amount = _to_float(single_match.group(1))
        if amount is not None:
            if K_SUFFIX_RE.search(single_match.group(0)):
                amount *= 1000
            return amount + SINGLE_VALUE_OFFSET

    return UNKNOWN_SALARY


def parse_posted_at(posted_at: Optional[str]) -> Optional[float]:
    """Parse an ISO-8601-ish date into a POSIX timestamp, or None.

    Accepts a trailing 'Z' and date-only values; naive values are read as UTC.
    """
    if not posted_at or not isinstance(posted_at, str):
        return None
    text = posted_at.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def normalize_for_search(text: Optional[str]) -> str:
    """Trim + lowercase, used before fuzzy matching."""
    return (text or "").strip().lower()


def compare_key(text: Optional[str]) -> str:
    """Trim, drop accents and casefold; the sort key for text columns.

    "Électricité" sorts with the e's, as a base-letter locale comparison would.
    """
    decomposed = unicodedata.normalize("NFKD", (text or "").strip())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _text(row: Mapping[str, Any], key: str) -> str:
    value = row.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(row: Mapping[str, Any], key: str) -> Optional[str]:
    value = _text(row, key)
    return value or None


def _coordinate(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def job_from_row(row: Mapping[str, Any]) -> JobRecord:
    """Convert one CSV row (header -> value) into a JobRecord.

    `lon` is preferred over `lng`; `id` falls back to `ats_id`, then `url`.
    """
    ats_id = _text(row, "ats_id")
    url = _text(row, "url")
    lon_value = row.get("lon") if row.get("lon") not in (None, "") else row.get("lng")

    data: Dict[str, Any] = {
        "url": url,
        "title": _text(row, "title"),
        "location": _text(row, "location"),
        "company": _text(row, "company"),
        "ats_id": ats_id or None,
        "id": _text(row, "id") or ats_id or url,
        "lat": _coordinate(row.get("lat")),
        "lng": _coordinate(lon_value),
        "salary_currency": _optional_text(row, "salary_currency"),
        "salary_period": _optional_text(row, "salary_period"),
        "salary_summary": _optional_text(row, "salary_summary"),
        "experience": _optional_text(row, "experience"),
        "posted_at": _optional_text(row, "posted_at"),
        "ats_type": _optional_text(row, "ats_type"),
        "description": _optional_text(row, "description"),
    }
    return JobRecord(**data)


def has_coordinates(job: JobRecord) -> bool:
    """True when the job can be placed on the map."""
    return job.lat is not None and job.lng is not None
