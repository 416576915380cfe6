from __future__ import annotations

import json

from ..core.models import MatchResult


def render_text(result: MatchResult, *, show_strategy: bool = False) -> str:
    line = f"{result.percentage}% {result.remark.value}"
    if not show_strategy:
        return line
    detail = result.strategy
    if result.capped:
        detail = f"{detail}, capped"
    return f"{line} [{detail}]"


def render_json(result: MatchResult) -> str:
    return json.dumps(result.to_dict(), indent=2)
