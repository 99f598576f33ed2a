"""Fuzzy field matching.

`fuzzy_match` runs a cascade of cheap deterministic checks (exact, whole
string similarity, whole word, substring) before falling back to per-word
edit distance. Two guards keep short queries honest:

- queries under 3 characters never match as free substrings, and a single
  query word of 1-2 characters never goes through edit distance, so "an"
  does not match "as" just because they differ by one letter;
- word-level similarity is only computed between words whose lengths are
  within a factor of two, so "ai" cannot match "openai" by similarity.
"""

from __future__ import annotations

import re
from typing import List

from .config import validate_threshold
from .similarity import similarity_ratio


DEFAULT_THRESHOLD = 0.6

MIN_SUBSTRING_LEN = 3
MIN_WORD_SUBSTRING_LEN = 4
MAX_SHORT_WORD_LEN = 2
MIN_LENGTH_RATIO = 0.5


def _split_words(text: str) -> List[str]:
    return [w for w in text.split() if w]


def _has_whole_word(text: str, word: str) -> bool:
    # User text goes through re.escape; "c++" or "(remote)" are literals here.
    pattern = r"\b" + re.escape(word) + r"\b"
    return re.search(pattern, text, flags=re.IGNORECASE) is not None


def _length_ratio(a: str, b: str) -> float:
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    return min(len(a), len(b)) / longer


def _similar_word(query_word: str, text_words: List[str], threshold: float) -> bool:
    for text_word in text_words:
        if _length_ratio(query_word, text_word) < MIN_LENGTH_RATIO:
            continue
        if similarity_ratio(text_word, query_word) >= threshold:
            return True
    return False


def _match_single_word(text: str, query_word: str, text_words: List[str], threshold: float) -> bool:
    if len(query_word) <= MAX_SHORT_WORD_LEN:
        return query_word in text

    for text_word in text_words:
        if text_word == query_word:
            return True
        if len(query_word) >= MIN_WORD_SUBSTRING_LEN and query_word in text_word:
            return True
        if _length_ratio(query_word, text_word) >= MIN_LENGTH_RATIO:
            if similarity_ratio(text_word, query_word) >= threshold:
                return True
    return False


def _word_supported(text: str, query_word: str, text_words: List[str], threshold: float) -> bool:
    if query_word in text_words:
        return True
    if _has_whole_word(text, query_word):
        return True
    if len(query_word) >= MIN_SUBSTRING_LEN and query_word in text:
        return True
    return _similar_word(query_word, text_words, threshold)


def fuzzy_match(text: str, query: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when `text` sufficiently resembles `query`.

    Args:
        text: Field value to search in (title, company, location, ...).
        query: User query; case and surrounding whitespace are ignored.
        threshold: Minimum similarity ratio in [0, 1] for the edit-distance steps.

    Raises:
        ConfigurationError: if `threshold` is outside [0, 1].
    """
    return fuzzy_match_unchecked(text, query, validate_threshold(threshold))


def fuzzy_match_unchecked(text: str, query: str, threshold: float) -> bool:
    """`fuzzy_match` for callers that validated `threshold` already."""
    normalized_text = (text or "").strip().lower()
    normalized_query = (query or "").strip().lower()

    if normalized_text == normalized_query:
        return True
    if not normalized_query:
        return False

    if similarity_ratio(normalized_text, normalized_query) >= threshold:
        return True

    if _has_whole_word(normalized_text, normalized_query):
        return True

    if len(normalized_query) >= MIN_SUBSTRING_LEN and normalized_query in normalized_text:
        return True

    query_words = _split_words(normalized_query)
    text_words = _split_words(normalized_text)

    if len(query_words) == 1:
        return _match_single_word(normalized_text, query_words[0], text_words, threshold)

    # Each query word needs its own support; they may land on different text words.
    return all(
        _word_supported(normalized_text, word, text_words, threshold)
        for word in query_words
    )
