"""
Domain models for name matching.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

EXACT_MATCH_SCORE = 100
HIGH_SIMILARITY_THRESHOLD = 90
POSSIBLE_MATCH_THRESHOLD = 70


class Remark(str, Enum):
    EXACT_MATCH = "Exact Match"
    HIGH_SIMILARITY = "High Similarity"
    POSSIBLE_MATCH = "Possible Match"
    LOW_MATCH = "Low Match"

    @classmethod
    def from_score(cls, score: int) -> "Remark":
        if score == EXACT_MATCH_SCORE:
            return cls.EXACT_MATCH
        if score >= HIGH_SIMILARITY_THRESHOLD:
            return cls.HIGH_SIMILARITY
        if score >= POSSIBLE_MATCH_THRESHOLD:
            return cls.POSSIBLE_MATCH
        return cls.LOW_MATCH


@dataclass(frozen=True)
class MatchResult:
    """
    Result of comparing an input name against a given name.

    Example:
        MatchResult(
            input_name="Vikash Yadav Luniwal",
            given_name="Vikash Yadav",
            percentage=94,
            remark=Remark.HIGH_SIMILARITY,
            strategy="subset",
        )
    """
    input_name: str
    """The input name exactly as the caller passed it"""

    given_name: str
    """The given (on-record) name exactly as the caller passed it"""

    percentage: int
    """Similarity score from 0 to 100"""

    remark: Remark
    """Qualitative classification of the percentage"""

    strategy: str = "alignment"
    """The step that decided the score (empty, exact, swapped, subset, alignment)"""

    capped: bool = False
    """Whether a global cap lowered the score"""

    def to_dict(self) -> dict[str, Any]:
        return {
            "inputName": self.input_name,
            "givenName": self.given_name,
            "percentage": self.percentage,
            "remark": self.remark.value,
            "strategy": self.strategy,
            "capped": self.capped,
        }
