"""Rule documents and query normalisation."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel


class RuleDocument(BaseModel):
    """A rule file's relative path and its raw text."""

    model_config = {"frozen": True}

    path: str
    content: str


def normalize_query(query: str) -> str:
    """Turn user input into a slash-separated relative path.

    Backslashes become slashes and leading ``./`` segments are dropped.
    Surrounding whitespace is stripped.
    """
    value = query.strip().replace("\\", "/")
    while value.startswith("./"):
        value = value[2:]
    return value


def candidate_paths(query: str, suffixes: Sequence[str]) -> list[str]:
    """Paths to try for *query*, in order: as given, then with each suffix.

    A suffix the query already ends with is not appended again.
    """
    candidates = [query]
    for suffix in suffixes:
        if suffix and not query.endswith(suffix):
            candidates.append(f"{query}{suffix}")
    return candidates
