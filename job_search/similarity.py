"""Levenshtein-based string similarity.

Both functions are case-sensitive; callers normalize case before comparing.
"""

from __future__ import annotations

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between `a` and `b` (insert/delete/substitute cost 1)."""
    rows, cols = len(a) + 1, len(b) + 1
    matrix: List[List[int]] = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j] + 1,  # deletion
                    matrix[i][j - 1] + 1,  # insertion
                    matrix[i - 1][j - 1] + 1,  # substitution
                )

    return matrix[rows - 1][cols - 1]


def similarity_ratio(a: str, b: str) -> float:
    """Similarity in [0, 1] where 1 means identical; two empty strings are identical."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len
