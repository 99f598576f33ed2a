"""Job search package.

The package is structured around one pure query engine:
- `models.py` defines the job record and search value objects.
- `similarity.py`, `fuzzy.py` and `query_parser.py` hold the matching logic.
- `normalize.py` contains deterministic parsing (salary, experience, dates).
- `engine.py` filters and sorts a job collection for one search.
- `sources/` contains the data sources the engine can be fed from.
"""

from .config import FuzzyThresholds, SearchConfig, load_config
from .engine import JobQueryEngine, query_jobs, run_query
from .errors import ConfigurationError
from .fuzzy import fuzzy_match
from .models import FacetFilters, JobRecord, ParsedSearch, SearchResult
from .normalize import get_experience_value, get_salary_value
from .query_parser import parse_search_text
from .similarity import levenshtein_distance, similarity_ratio

__all__ = [
    "ConfigurationError",
    "FacetFilters",
    "FuzzyThresholds",
    "JobQueryEngine",
    "JobRecord",
    "ParsedSearch",
    "SearchConfig",
    "SearchResult",
    "fuzzy_match",
    "get_experience_value",
    "get_salary_value",
    "levenshtein_distance",
    "load_config",
    "parse_search_text",
    "query_jobs",
    "run_query",
    "similarity_ratio",
]
