from __future__ import annotations

from typing import Optional

from ..config import Settings
from ..core.matching import NameMatcher
from .output import render_json, render_text


def run(
    settings: Settings,
    input_name: str,
    given_name: str,
    *,
    json_output: Optional[bool] = None,
    show_strategy: Optional[bool] = None,
) -> list[str]:
    if json_output is None:
        json_output = settings.output.format == "json"
    if show_strategy is None:
        show_strategy = settings.output.show_strategy

    result = NameMatcher().match(input_name, given_name)
    if json_output:
        return [render_json(result)]
    return [render_text(result, show_strategy=show_strategy)]
