"""Exceptions raised by the search engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when search options are invalid (unknown sort key, bad threshold, ...).

    Dirty job data never raises; only caller-supplied configuration does.
    """
