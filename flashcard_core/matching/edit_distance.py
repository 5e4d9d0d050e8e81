"""Edit distance between a spoken guess and a target word."""
from __future__ import annotations

from typing import List, Sequence, Union

from .normalizer import grapheme_units


def levenshtein_distance(a: Union[str, Sequence[str]], b: Union[str, Sequence[str]]) -> int:
    """Classic Levenshtein distance over character sequences.

    Counts the minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``. Strings are split into
    user-perceived characters first, so an accented letter or a multi-part
    emoji counts as one unit however it is encoded.

    Args:
        a: Source word or pre-split units (usually the normalized guess)
        b: Target word or pre-split units (usually the vocabulary word)

    Returns:
        The edit distance, between 0 and the longer unit count
    """
    if isinstance(a, str):
        a = grapheme_units(a)
    if isinstance(b, str):
        b = grapheme_units(b)

    m, n = len(a), len(b)
    # dp costs
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # deletion
                    dp[i][j - 1],      # insertion
                    dp[i - 1][j - 1],  # substitution
                )

    return dp[m][n]
