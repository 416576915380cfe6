"Fuzzy personal name matching."

from importlib import metadata

from .core import MatchResult, NameMatcher, Remark, match_names

__all__ = ["MatchResult", "NameMatcher", "Remark", "__version__", "match_names"]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("name-match")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
