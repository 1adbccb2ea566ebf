"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console and are dispatched by
``result.op`` in :func:`render_result`. Ops without a renderer fall
through to a generic key/value listing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fluentlink.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from fluentlink.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich.

    The text carries no ANSI codes when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _display(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    if value is None:
        return "-"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "fluent.ok"), (f"  {result.op}", "fluent.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "fluent.link" if key.endswith("link") and value else ""
    console.print(Text.assemble((f"  {key}: ", "fluent.key"), (_display(value), style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = f"[{err.code}] {err.message}" if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "fluent.error"), (f"  {result.op}", "fluent.op"), " - ", msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="fluent.key"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {_display(value)}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _locale_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table with one row per registered locale."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="fluent.code", no_wrap=True)
    table.add_column("Title")
    table.add_column("Segment", no_wrap=True)
    table.add_column("Domain", no_wrap=True)
    table.add_column("Default", style="fluent.default")
    table.add_column("Fallbacks")
    if verbose:
        table.add_column("Hreflang", no_wrap=True)

    for item in items:
        if item.get("is_global_default"):
            default = "global"
        elif item.get("is_default"):
            default = "yes"
        else:
            default = ""
        row = [
            Text(str(item.get("code", ""))),
            Text(str(item.get("title", ""))),
            Text(str(item.get("url_segment", ""))),
            Text(_display(item.get("domain"))),
            Text(default),
            Text(", ".join(item.get("fallbacks") or [])),
        ]
        if verbose:
            row.append(Text(str(item.get("hreflang", ""))))
        table.add_row(*row)
    return table


def _render_locales(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_locale_table(items, verbose=verbose))
    console.print(Text(f"\n{result.data.get('count', len(items))} locales", style="fluent.key"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_locales": _render_locales,
}
