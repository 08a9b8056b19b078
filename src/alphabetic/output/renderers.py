"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from alphabetic.output.console import create_console, get_output, style_for_case

if TYPE_CHECKING:
    from rich.console import Console

    from alphabetic.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Successful letter results reduce to the resulting characters.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    letters = result.data.get("letters")
    if isinstance(letters, list):
        return "".join(str(item.get("char", "")) for item in letters)
    for key in ("output", "char"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="abc.ok")
    op = Text(result.op, style="abc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="abc.key")
    if key in ("char", "input", "output"):
        v = Text(str(value), style="abc.char")
    elif key == "position":
        v = Text(str(value), style="abc.position")
    elif key == "case":
        v = Text(str(value), style=style_for_case(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="abc.error")
    op = Text(result.op, style="abc.op")
    sep = Text("—")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Letter renderers ──────────────────────────────────────────────────


def _render_letter(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render single-letter results (shift, letter)."""
    _status_line(console, result)
    for key in ("input", "amount", "output", "char", "position", "case"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render describe results as a table, one row per letter."""
    letters = result.data.get("letters", [])
    _status_line(console, result)
    if not letters:
        console.print("\n0 letters")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    if verbose:
        table.add_column("Offset", style="dim", justify="right")
    table.add_column("Char", style="abc.char")
    table.add_column("Position", style="abc.position", justify="right")
    table.add_column("Case")

    for offset, item in enumerate(letters):
        case = str(item.get("case", ""))
        row: list[Any] = [
            str(item.get("char", "")),
            str(item.get("position", "")),
            Text(case, style=style_for_case(case)),
        ]
        if verbose:
            row.insert(0, str(offset))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(letters))} letters")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "describe": _render_describe,
    "shift": _render_letter,
    "letter": _render_letter,
}
