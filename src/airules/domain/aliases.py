"""Alias model and the built-in alias table.

An alias maps a short keyword (``ascii``) to a rule document path
(``ascii-art/basics.md``). Built-ins can be overridden, and new ones
added, from the ``[aliases]`` table of ``airules.toml``.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, field_validator

# Words the CLI claims for itself; an alias with one of these names
# could never be reached.
RESERVED_KEYWORDS = frozenset({"list", "show", "init"})


class Alias(BaseModel):
    """A keyword pointing at a single rule document."""

    model_config = {"frozen": True}

    keyword: str
    target_path: str
    description: str = ""

    @field_validator("keyword")
    @classmethod
    def _check_keyword(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "Alias keyword must not be empty"
            raise ValueError(msg)
        if "/" in value:
            msg = f"Alias keyword must not contain '/': {value!r}"
            raise ValueError(msg)
        if value in RESERVED_KEYWORDS:
            msg = f"Alias keyword is reserved: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("target_path")
    @classmethod
    def _check_target(cls, value: str) -> str:
        value = value.strip().lstrip("/")
        if not value:
            msg = "Alias target path must not be empty"
            raise ValueError(msg)
        return value


DEFAULT_ALIASES: tuple[Alias, ...] = (
    Alias(
        keyword="ascii",
        target_path="ascii-art/basics.md",
        description="Show ASCII art basics",
    ),
    Alias(
        keyword="claude",
        target_path="claude-code/prompts/ascii-fix.md",
        description="Show Claude Code rules",
    ),
)


def build_alias_table(overrides: Iterable[Alias] = ()) -> dict[str, Alias]:
    """Merge *overrides* over the built-in aliases, keyed by keyword.

    Built-ins keep their declaration order; new keywords follow in the
    order given.
    """
    table = {alias.keyword: alias for alias in DEFAULT_ALIASES}
    for alias in overrides:
        table[alias.keyword] = alias
    return table
