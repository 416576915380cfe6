"""
Core domain layer for name-match.

This package contains pure business logic with no external dependencies:
- Name normalization and tokenization
- Levenshtein distance
- Tiered name scoring (exact, swapped, subset, greedy alignment)
- Remark classification

All code here should be testable without I/O operations.
"""

from __future__ import annotations

from .distance import levenshtein
from .matching import NameMatcher, match_names
from .models import MatchResult, Remark
from .normalization import normalize_name, prepare_name

__all__ = [
    "MatchResult",
    "NameMatcher",
    "Remark",
    "levenshtein",
    "match_names",
    "normalize_name",
    "prepare_name",
]
