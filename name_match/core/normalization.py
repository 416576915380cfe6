"""
Name normalization and tokenization.

This module turns free-text personal names into comparable token lists:
- Lowercasing, period removal and whitespace collapsing
- Honorific prefix removal ("Dr", "Mr", "Shri", ...)
- Dotted initial merging ("v. k." -> "vk")
- Packed initial expansion ("yl" -> ["y", "l"])

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re
from string import ascii_lowercase
from typing import Iterable, Optional

HONORIFICS = ("mr", "mrs", "ms", "miss", "shri", "smt", "dr")
VOWELS = frozenset("aeiou")

MIN_PACKED_INITIALS = 2
MAX_PACKED_INITIALS = 4

# "v. k." / "v.k." at a word boundary
DOTTED_INITIALS_PATTERN = re.compile(r"\b([a-z])\.\s*([a-z])\.")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_name(name: Optional[str]) -> str:
    """
    Normalize a raw name for comparison.

    Process:
    1. Lowercase
    2. Remove periods
    3. Collapse whitespace and trim
    4. Drop honorific words

    Examples:
        "Dr. Vikash  Yadav" → "vikash yadav"
        "SHRI R.K. Laxman" → "rk laxman"

    Args:
        name: The raw name, possibly empty or None

    Returns:
        Normalized name (may be empty)
    """
    if not name:
        return ""

    cleaned = name.lower().replace(".", "")
    cleaned = WHITESPACE_PATTERN.sub(" ", cleaned).strip()

    words = [word for word in cleaned.split(" ") if word not in HONORIFICS]
    return " ".join(words)


def merge_initials(name: str) -> str:
    """
    Merge dotted initial pairs into a single packed token.

    Only has an effect while periods are still present:
        "v. k. sharma" → "vk sharma"
        "v k sharma" → "v k sharma"
    """
    return DOTTED_INITIALS_PATTERN.sub(r"\1\2", name)


def prepare_name(name: Optional[str]) -> str:
    """
    Run the full preparation stage on a raw name.

    Dotted initials are merged before normalization strips the periods,
    so "J. K. Singh" prepares to "jk singh" while "J K Singh" prepares
    to "j k singh".
    """
    if not name:
        return ""
    return normalize_name(merge_initials(name.lower()))


def tokenize(name: str) -> list[str]:
    return [token for token in name.split(" ") if token]


def is_packed_initials(token: str) -> bool:
    """True for 2-4 lowercase ASCII letters with no vowel, e.g. "yl" or "rk"."""
    if not MIN_PACKED_INITIALS <= len(token) <= MAX_PACKED_INITIALS:
        return False
    return all(ch in ascii_lowercase and ch not in VOWELS for ch in token)


def expand_combined_initials(tokens: Iterable[str]) -> list[str]:
    """
    Split packed initials into one token per letter.

    Examples:
        ["vikash", "yl"] → ["vikash", "y", "l"]
        ["rk", "laxman"] → ["r", "k", "laxman"]
        ["mary"] → ["mary"]  (contains a vowel)
    """
    expanded: list[str] = []
    for token in tokens:
        if is_packed_initials(token):
            expanded.extend(token)
        else:
            expanded.append(token)
    return expanded


def normalize_initial_token(token: str) -> str:
    """Return a canonical key for packed initials ("ly" and "yl" → "ly")."""
    if is_packed_initials(token):
        return "".join(sorted(token))
    return token


def prepare_tokens(name: str) -> list[str]:
    """Tokenize a prepared name and expand its packed initials."""
    return expand_combined_initials(tokenize(name))
