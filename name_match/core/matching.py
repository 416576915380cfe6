"""
Tiered scoring for personal name comparison.

Strategies are tried in order and the first one that applies wins:
- Exact matching (same prepared name) → 100
- Swapped matching (same tokens, any order) → 99
- Subset matching (one token list contained in the other) → 90-99, or a
  ratio-based score when only initials overlap
- Greedy token alignment (prefix, edit distance and initial similarity)

Global caps then stop bare initials or disjoint full names from scoring
high. All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from .distance import levenshtein
from .models import EXACT_MATCH_SCORE, MatchResult, Remark
from .normalization import normalize_initial_token, prepare_name, prepare_tokens

logger = logging.getLogger(__name__)

SWAPPED_SCORE = 99
SUBSET_SAME_LENGTH_SCORE = 99
SUBSET_ONE_MISSING_SCORE = 94
SUBSET_MANY_MISSING_SCORE = 90
SUBSET_INITIALS_WEIGHT = 60

PREFIX_BOOST = 1.1
EDIT_DISTANCE_BOOST = 1.05
INITIAL_MATCH_SCORE = 0.85
COVERAGE_WEIGHT = 0.6
PRECISION_WEIGHT = 0.4

NEAR_CERTAIN_SCORE = 98
ALIGNMENT_CEILING = 95
CAPPED_SCORE = 65


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative values used here (2.5 → 3)."""
    return int(math.floor(value + 0.5))


def has_full_token_match(input_tokens: Sequence[str], given_tokens: Sequence[str]) -> bool:
    """True if a given token longer than one letter appears verbatim in the input."""
    return any(len(token) > 1 and token in input_tokens for token in given_tokens)


def is_initial_match(token1: str, token2: str) -> bool:
    """
    Check if one token is a single letter that starts the other.

    Examples:
        ("y", "yadav") → True
        ("yadav", "y") → True
        ("y", "luniwal") → False
    """
    if len(token1) == 1 and token2.startswith(token1):
        return True
    if len(token2) == 1 and token1.startswith(token2):
        return True
    return False


def match_exact(input_name: str, given_name: str) -> Optional[int]:
    if input_name == given_name:
        return EXACT_MATCH_SCORE
    return None


def match_swapped(input_tokens: Sequence[str], given_tokens: Sequence[str]) -> Optional[int]:
    """
    Check if both names hold the same tokens in a different order.

    Packed initials are compared by their sorted letters, so "yl" and "ly"
    count as the same token.
    """
    if len(input_tokens) != len(given_tokens):
        return None

    sorted_input = " ".join(sorted(normalize_initial_token(t) for t in input_tokens))
    sorted_given = " ".join(sorted(normalize_initial_token(t) for t in given_tokens))
    if sorted_input == sorted_given:
        return SWAPPED_SCORE
    return None


def match_subset(input_tokens: Sequence[str], given_tokens: Sequence[str]) -> Optional[int]:
    """
    Check if one name's tokens are all contained in the other's.

    When a full word is shared, the score drops with the number of missing
    tokens (99, 94, 90). When only initials overlap, the score is the token
    count ratio scaled to 60.
    """
    given_in_input = all(token in input_tokens for token in given_tokens)
    input_in_given = all(token in given_tokens for token in input_tokens)
    if not (given_in_input or input_in_given):
        return None

    longer = max(len(input_tokens), len(given_tokens))
    shorter = min(len(input_tokens), len(given_tokens))
    diff = longer - shorter

    if has_full_token_match(input_tokens, given_tokens):
        if diff == 0:
            return SUBSET_SAME_LENGTH_SCORE
        if diff == 1:
            return SUBSET_ONE_MISSING_SCORE
        return SUBSET_MANY_MISSING_SCORE

    return round_half_up(shorter / longer * SUBSET_INITIALS_WEIGHT)


def token_similarity(input_token: str, given_token: str) -> float:
    """
    Similarity of two tokens in [0, 1].

    The best of:
    1. Prefix similarity (length ratio boosted by 1.1)
    2. Edit distance similarity (boosted by 1.05)
    3. Initial match (0.85 for "y" vs "yadav")
    """
    best = 0.0
    longest = max(len(input_token), len(given_token))

    if input_token.startswith(given_token) or given_token.startswith(input_token):
        shortest = min(len(input_token), len(given_token))
        best = max(best, min(1.0, shortest / longest * PREFIX_BOOST))

    distance = levenshtein(input_token, given_token)
    best = max(best, min(1.0, (1 - distance / longest) * EDIT_DISTANCE_BOOST))

    if is_initial_match(input_token, given_token):
        best = max(best, INITIAL_MATCH_SCORE)

    return best


def match_alignment(
    input_tokens: Sequence[str],
    given_tokens: Sequence[str],
    input_name: str,
    given_name: str,
) -> int:
    """
    Greedily align each given token with its most similar unused input token.

    Given tokens are processed in order and each input token can be consumed
    once; earlier given tokens win and ties keep the earliest input token.
    The matched similarity is blended as 60% coverage (over input tokens)
    and 40% precision (over given tokens), so the score is not symmetric.
    """
    matched_score = 0.0
    used_indexes: set[int] = set()

    for given_token in given_tokens:
        best_match = 0.0
        best_index = -1

        for index, input_token in enumerate(input_tokens):
            if index in used_indexes:
                continue
            similarity = token_similarity(input_token, given_token)
            if similarity > best_match:
                best_match = similarity
                best_index = index

        if best_index != -1:
            used_indexes.add(best_index)
            matched_score += best_match

    coverage = matched_score / len(input_tokens)
    precision = matched_score / len(given_tokens)
    score = round_half_up((coverage * COVERAGE_WEIGHT + precision * PRECISION_WEIGHT) * 100)

    # Only the exact tier may claim near certainty
    if score >= NEAR_CERTAIN_SCORE and input_name != given_name:
        score = ALIGNMENT_CEILING

    return score


def apply_caps(score: int, input_tokens: Sequence[str], given_tokens: Sequence[str]) -> int:
    """
    Limit the score to 65 when the names cannot be the same person with confidence.

    Applies when one side is bare initials against a spelled-out name, or
    when both sides are spelled out but share no full word.
    """
    input_has_full = any(len(token) > 1 for token in input_tokens)
    given_has_full = any(len(token) > 1 for token in given_tokens)
    input_all_initials = all(len(token) == 1 for token in input_tokens)
    given_all_initials = all(len(token) == 1 for token in given_tokens)

    if (input_has_full and given_all_initials) or (given_has_full and input_all_initials):
        return min(score, CAPPED_SCORE)
    if input_has_full and given_has_full and not has_full_token_match(input_tokens, given_tokens):
        return min(score, CAPPED_SCORE)
    return score


class NameMatcher:
    """
    Scores how likely two free-text personal names refer to the same person.

    Usage:
        matcher = NameMatcher()
        result = matcher.match("Vikash Yadav Luniwal", "Vikash Y L")
        print(result.percentage, result.remark.value)  # 90 High Similarity

    The matcher holds no state; one instance can be shared across threads.
    """

    def match(self, input_name: Optional[str], given_name: Optional[str]) -> MatchResult:
        """
        Compare an input name against a given name.

        Args:
            input_name: Name as typed by the user (None or empty allowed)
            given_name: Name on record (None or empty allowed)

        Returns:
            MatchResult echoing the original arguments
        """
        original_input = input_name or ""
        original_given = given_name or ""

        prepared_input = prepare_name(input_name)
        prepared_given = prepare_name(given_name)
        input_tokens = prepare_tokens(prepared_input)
        given_tokens = prepare_tokens(prepared_given)

        if not input_tokens or not given_tokens:
            logger.debug("Empty name after normalization: %r vs %r", original_input, original_given)
            return MatchResult(
                input_name=original_input,
                given_name=original_given,
                percentage=0,
                remark=Remark.LOW_MATCH,
                strategy="empty",
            )

        strategy, score = self._score(input_tokens, given_tokens, prepared_input, prepared_given)
        capped_score = apply_caps(score, input_tokens, given_tokens)
        if capped_score != score:
            logger.debug(
                "Capped %s score %d -> %d for %r vs %r",
                strategy, score, capped_score, original_input, original_given,
            )
        else:
            logger.debug("Scored %r vs %r via %s: %d", original_input, original_given, strategy, score)

        return MatchResult(
            input_name=original_input,
            given_name=original_given,
            percentage=capped_score,
            remark=Remark.from_score(capped_score),
            strategy=strategy,
            capped=capped_score != score,
        )

    def _score(
        self,
        input_tokens: list[str],
        given_tokens: list[str],
        input_name: str,
        given_name: str,
    ) -> tuple[str, int]:
        # Strategy 1: Exact match
        score = match_exact(input_name, given_name)
        if score is not None:
            return "exact", score

        # Strategy 2: Same tokens, different order
        score = match_swapped(input_tokens, given_tokens)
        if score is not None:
            return "swapped", score

        # Strategy 3: One token list contained in the other
        score = match_subset(input_tokens, given_tokens)
        if score is not None:
            return "subset", score

        # Strategy 4: Greedy token alignment
        return "alignment", match_alignment(input_tokens, given_tokens, input_name, given_name)


_DEFAULT_MATCHER = NameMatcher()


def match_names(input_name: Optional[str], given_name: Optional[str]) -> MatchResult:
    """Compare two names with the default matcher. Never raises."""
    return _DEFAULT_MATCHER.match(input_name, given_name)
