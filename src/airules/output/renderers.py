"""Operation-specific renderers for ServiceResult.

Rule documents and listings are plain text and bypass Rich entirely so
they reach stdout byte for byte. Everything else is written to a Rich
Console (backed by StringIO) and extracted via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from airules.output.console import create_console, get_output
from airules.services.result import NOT_FOUND

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from airules.services.result import ServiceResult

# Ops whose rendered text is the document itself; printed without a
# trailing newline of our own.
RAW_OPS = frozenset({"show"})

USAGE_EXAMPLE_PATH = "ascii-art/tables.md"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult for a human reader.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if not result.ok:
        if result.error is not None and result.error.code == NOT_FOUND:
            return render_not_found(result)
        return _render_with_console(_render_error, result, verbose=verbose)

    text_renderer = _TEXT_RENDERERS.get(result.op)
    if text_renderer is not None:
        return text_renderer(result)

    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    return _render_with_console(renderer, result, verbose=verbose)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "show":
        return str(result.data.get("content", ""))
    if result.op == "list":
        return "\n".join(result.data.get("items", []))
    if result.op == "usage":
        return "\n".join(a["keyword"] for a in result.data.get("aliases", []))
    if result.op == "init_library":
        return str(result.data.get("root", ""))
    return f"OK: {result.op}"


def render_not_found(result: ServiceResult) -> str:
    """The fixed two-line notice for a query that resolved nowhere."""
    err = result.error
    message = err.message if err else "Rule not found"
    hint = err.detail.get("hint") if err else None
    return f"{message}\n{hint}" if hint else message


def render_usage(result: ServiceResult) -> str:
    """Usage text listing every alias, the list command and the path form."""
    aliases: list[dict[str, Any]] = result.data.get("aliases", [])
    entries = [(a["keyword"], a["description"] or f"Show {a['path']}") for a in aliases]
    entries.append(("list", "List all available rules"))
    entries.append(("[path]", "Show specific rule file"))
    width = max(10, *(len(name) + 2 for name, _ in entries))

    lines = ["Usage: airules [command] [path]", "", "Commands:"]
    lines.extend(f"  {name.ljust(width)}- {description}" for name, description in entries)
    lines.extend(["", "Examples:"])
    if aliases:
        lines.append(f"  airules {aliases[0]['keyword']}")
    lines.append(f"  airules {USAGE_EXAMPLE_PATH}")
    return "\n".join(lines)


# ── Plain-text renderers ──────────────────────────────────────────────


def _render_show(result: ServiceResult) -> str:
    return str(result.data.get("content", ""))


def _render_list(result: ServiceResult) -> str:
    return "\n".join(result.data.get("items", []))


_TEXT_RENDERERS: dict[str, Callable[[ServiceResult], str]] = {
    "show": _render_show,
    "list": _render_list,
    "usage": render_usage,
}


# ── Rich renderers ────────────────────────────────────────────────────


def _render_with_console(
    renderer: Callable[..., None], result: ServiceResult, *, verbose: bool
) -> str:
    console = create_console()
    renderer(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "rules.ok"), (f"  {result.op}", "rules.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "rules.path" if key in ("root", "path") else ""
    console.print(Text.assemble((f"  {key}: ", "rules.key"), (str(value), style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "rules.error"), (f"  {result.op}", "rules.op"), " — ", msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name", ""))
    _field(console, "root", d.get("root", ""))
    created = d.get("files_created", [])
    _field(console, "files_created", len(created))
    if verbose:
        for rel in created:
            console.print(Text(f"    {rel}", style="rules.path"))
        for rel in d.get("dirs_created", []):
            console.print(Text(f"    {rel}/", style="rules.path"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "init_library": _render_init,
}
