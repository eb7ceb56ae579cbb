"""Shared pytest fixtures and test helpers for airules tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from airules.config.settings import RulesSettings
from airules.infrastructure.library import RuleLibrary

BASICS = "# ASCII Art Rules\n\n1. **Count characters precisely** for each column\n"
TABLES = "# ASCII Tables Guide\n\n┌──────┐\n│ Cell │\n└──────┘"  # no trailing newline
ASCII_FIX = "# Claude Code ASCII Diagram Fix\n\nCount characters precisely.\n"
NESTED_README = "# Claude Code notes\n"
SIMPLE_TABLE = "┌───┐\n│ A │\n└───┘\n"

# Every document `airules list` should report for the rules_root fixture.
LISTED = [
    "ascii-art/basics.md",
    "ascii-art/tables.md",
    "claude-code/README.md",
    "claude-code/prompts/ascii-fix.md",
]

_ENV_VARS = (
    "AIRULES_ROOT",
    "AIRULES_CONFIG",
    "AIRULES_STRICT",
    "AIRULES_LOOKUP__STRICT",
    "AIRULES_JSON_OUTPUT",
    "AIRULES_QUIET",
    "AIRULES_VERBOSE",
    "AIRULES_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own AIRULES_* settings out of the tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() so handlers never outlive CliRunner streams."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("airules")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules_root(tmp_path: Path) -> Path:
    """A small rules library.

    This is the single source of truth for the test library layout.
    """
    root = tmp_path / "rules"
    write(root / "README.md", "# Top readme\n")
    write(root / "ascii-art" / "basics.md", BASICS)
    write(root / "ascii-art" / "tables.md", TABLES)
    write(root / "ascii-art" / "examples" / "good" / "simple-table.txt", SIMPLE_TABLE)
    write(root / "claude-code" / "prompts" / "ascii-fix.md", ASCII_FIX)
    write(root / "claude-code" / "README.md", NESTED_README)
    write(root / ".git" / "notes.md", "not a rule\n")
    (root / "reference" / "charts").mkdir(parents=True)
    return root


@pytest.fixture
def settings(rules_root: Path) -> RulesSettings:
    return RulesSettings.from_cli(root=rules_root, start=rules_root)


@pytest.fixture
def library(settings: RulesSettings) -> RuleLibrary:
    return RuleLibrary(settings)


@pytest.fixture
def _isolated_library(rules_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from inside the test library with an airules.toml marking it.

    Use via ``@pytest.mark.usefixtures("_isolated_library")``.
    """
    (rules_root / "airules.toml").write_text('name = "test-rules"\n', encoding="utf-8")
    monkeypatch.chdir(rules_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
