"""Rich renderers for ServiceResult.

Dispatch is by the verb prefix of ``result.op``: ``list_*`` results render
as a table, single-record results as key/value lines, ``delete_*`` as a
status line. Failures render as ``ERROR  op — message``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from inventoryctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from inventoryctl.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.op.startswith("list_"):
        _render_table(result, console)
    elif result.op.startswith("delete_"):
        _status_line(console, result)
        _field(console, "id", result.data.get("id"))
    else:
        _render_record(result, console)

    if verbose and result.meta:
        _render_meta(console, result.meta)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: ids only for successes, one line for failures."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="inv.ok"), Text(f"  {result.op}", style="inv.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="inv.key")
    v = Text(str(value), style="inv.id" if key == "id" else "")
    console.print(k, v, sep="")


def _render_record(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_table(result: ServiceResult, console: Console) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    _status_line(console, result)
    if not items:
        console.print(Text("  (no records)", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    columns = list(items[0])
    for col in columns:
        table.add_column(
            "ID" if col == "id" else col.replace("_", " ").title(),
            style="inv.id" if col == "id" else None,
            no_wrap=col == "id",
        )
    for item in items:
        table.add_row(*(str(item.get(col, "")) for col in columns))
    console.print(table)
    console.print(Text(f"  {result.data.get('count', len(items))} record(s)", style="dim"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="inv.error"),
        Text(f"  {result.op}", style="inv.op"),
        Text(" — "),
        msg,
        sep="",
    )
    if err is None:
        return
    console.print(Text(f"  code: {err.code}", style="inv.code"))
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {json.dumps(value, separators=(',', ':'))}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = Text(f"{prefix}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}")
    annotations = span.get("annotations")
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)
