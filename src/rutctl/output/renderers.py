"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rutctl.output.console import create_console, get_output, style_for_bool

if TYPE_CHECKING:
    from rich.console import Console

    from rutctl.services.result import ServiceResult

# Field holding the single value ``--quiet`` prints for each op.
_PRIMARY_FIELD: dict[str, str] = {
    "validate": "formatted",
    "format": "formatted",
    "complete": "formatted",
    "mask": "masked",
    "sample": "rut",
    "compare": "equal",
    "inspect": "valid",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the primary value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    key = _PRIMARY_FIELD.get(result.op)
    if key is not None and key in result.data:
        value = result.data[key]
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="rut.ok")
    op = Text(f"  {result.op}", style="rut.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rut.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style=style_for_bool(value))
    elif key in ("formatted", "masked", "rut"):
        v = Text(str(value), style="rut.value")
    elif value is None:
        v = Text("-", style="rut.key")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rut.error")
    op = Text(f"  {result.op}", style="rut.op")
    sep = Text(" - ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the inspect report as a two-column table."""
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Field", style="rut.key")
    table.add_column("Value")
    for key, value in result.data.items():
        if isinstance(value, bool):
            cell = Text(str(value).lower(), style=style_for_bool(value))
        elif value is None or value == "":
            cell = Text("-", style="dim")
        else:
            cell = Text(str(value))
        table.add_row(key, cell)
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    equal = bool(result.data.get("equal"))
    verdict = "same RUT" if equal else "different RUTs"
    console.print(
        Text(f"  {result.data.get('a')} / {result.data.get('b')}: "),
        Text(verdict, style=style_for_bool(equal)),
        sep="",
    )


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_generic,
    "format": _render_generic,
    "complete": _render_generic,
    "mask": _render_generic,
    "sample": _render_generic,
    "inspect": _render_inspect,
    "compare": _render_compare,
}
