"""
Edit distance between name tokens.
"""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """
    Levenshtein distance (insert, delete, substitute each cost 1).

    Examples:
        levenshtein("yadav", "yadaw") → 1
        levenshtein("rahul", "rahool") → 2
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        curr = [i]
        for j, ch_b in enumerate(b, start=1):
            cost = 0 if ch_a == ch_b else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]
