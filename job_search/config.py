"""Search configuration.

Fuzzy thresholds are policy, not constants baked into the matcher: different
deployments may want stricter or looser matching, so they live here with the
default sort order and age filter. Values can be supplied in code or loaded
from a YAML file:

    search:
      sort_by: recent
      age_filter_days: 30
      fuzzy_thresholds:
        company: 0.95
        location: 0.85
        general: 0.75
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError
from .models import SORT_KEYS, SortKey


class FuzzyThresholds(BaseModel):
    """Minimum similarity ratios used by the fuzzy matcher, per field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    company: float = Field(default=0.95, ge=0.0, le=1.0)
    location: float = Field(default=0.85, ge=0.0, le=1.0)
    general: float = Field(default=0.75, ge=0.0, le=1.0)


class SearchConfig(BaseModel):
    """Defaults applied by `JobQueryEngine.search` when a call leaves them out."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    sort_by: SortKey = "title"
    age_filter_days: Optional[int] = Field(default=None, ge=0)
    fuzzy_thresholds: FuzzyThresholds = Field(default_factory=FuzzyThresholds)


def build_config(data: Optional[Dict[str, Any]] = None) -> SearchConfig:
    """Validate a plain mapping into a SearchConfig.

    Raises:
        ConfigurationError: if any value is out of range or unknown.
    """
    try:
        return SearchConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid search configuration: {exc}") from exc


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a SearchConfig from a YAML file.

    The document may either hold the settings at top level or under a
    `search:` section.
    """
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Could not parse {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    section = raw.get("search", raw)
    if not isinstance(section, dict):
        raise ConfigurationError("'search' section must be a mapping")

    return build_config(section)


def validate_sort_key(sort_by: str) -> SortKey:
    if sort_by not in SORT_KEYS:
        raise ConfigurationError(
            f"Unknown sort key {sort_by!r}; expected one of {', '.join(SORT_KEYS)}"
        )
    return sort_by  # type: ignore[return-value]


def validate_threshold(value: float, name: str = "threshold") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be a number in [0, 1], got {value!r}")
    return float(value)


def validate_age_filter(days: Optional[int]) -> Optional[int]:
    if days is None:
        return None
    if isinstance(days, bool) or not isinstance(days, int) or days < 0:
        raise ConfigurationError(f"age filter must be a non-negative integer number of days, got {days!r}")
    return days
