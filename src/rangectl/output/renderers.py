"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; :func:`render_result`
dispatches on ``result.op`` and unknown ops fall through to a generic
key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rangectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rangectl.services.result import ServiceResult

# Single-value ops print just that value under --quiet.
_QUIET_KEYS: dict[str, str] = {
    "to_utc": "instant",
    "from_utc": "civil",
    "format_in_zone": "text",
    "zone_info": "offset",
}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    key = _QUIET_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# --- Helpers ---


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="range.ok"), Text(f"  {result.op}", style="range.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="range.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(f"    {key}: {value}")


# --- Error renderer ---


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus every validation message, in evaluation order."""
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="range.error"),
        Text(f"  {result.op}", style="range.op"),
        Text(f": {msg}"),
        sep="",
    )
    if err is None:
        return

    errors = err.detail.get("errors") or []
    if len(errors) > 1:
        for message in errors:
            console.print(Text("  - ", style="range.error"), Text(str(message)), sep="")
    if verbose:
        extra = {key: value for key, value in err.detail.items() if key != "errors"}
        if extra:
            console.print(Text("  detail:", style="dim"))
            for key, value in extra.items():
                console.print(f"    {key}: {value}")


# --- Zone renderers ---


def _render_zones(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Zone", style="range.zone", no_wrap=True)
    table.add_column("Default")
    for item in result.data.get("items", []):
        table.add_row(str(item["id"]), "*" if item.get("default") else "")
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} zones")


def _render_zone_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    dst = Text(" DST", style="range.dst") if d.get("is_dst") else Text("")
    console.print(
        Text(str(d.get("zone")), style="range.zone"),
        Text(f"  {d.get('offset')} ({d.get('abbreviation')})"),
        dst,
        sep="",
    )
    _field(console, "instant", d.get("instant"), "range.instant")
    _field(console, "local", d.get("local"), "range.civil")
    if verbose:
        _field(console, "offset_minutes", d.get("offset_minutes"))
        _render_meta(console, result)


def _render_conversion(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """to_utc / from_utc: civil and instant side by side."""
    d = result.data
    _status_line(console, result)
    _field(console, "zone", d.get("zone"), "range.zone")
    _field(console, "civil", d.get("civil"), "range.civil")
    _field(console, "instant", d.get("instant"), "range.instant")
    if "offset" in d:
        _field(console, "offset", d["offset"])


def _render_formatted(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("text", ""))))
    if verbose:
        _field(console, "zone", result.data.get("zone"), "range.zone")
        _field(console, "style", result.data.get("style"))


# --- Validation renderers ---


def _render_validation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    if "date" in d:
        _field(console, "date", d["date"], "range.civil")
    if "start" in d:
        _field(console, "start", d["start"], "range.civil")
        _field(console, "end", d["end"], "range.civil")
        _field(console, "duration", d.get("duration"))
    if verbose:
        _render_meta(console, result)


# --- Preset renderers ---


def _render_presets(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="range.op", no_wrap=True)
    table.add_column("Label")
    table.add_column("Start", style="range.civil")
    table.add_column("End", style="range.civil")
    table.add_column("Days", justify="right")
    if verbose:
        table.add_column("Start (UTC)", style="range.instant")
        table.add_column("End (UTC)", style="range.instant")
    for item in items:
        row = [
            str(item["id"]),
            str(item["label"]),
            f"{item['start_date']} {item['start_time']}",
            f"{item['end_date']} {item['end_time']}",
            str(item["days"]),
        ]
        if verbose:
            row.extend([str(item["start"]), str(item["end"])])
        table.add_row(*row)
    console.print(table)
    if items:
        console.print(f"\n{len(items)} presets in [range.zone]{items[0]['zone']}[/range.zone]")


def _render_preset(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(str(d.get("label")), style="bold"), Text(f"  ({d.get('id')})", style="dim"), sep="")
    _field(console, "zone", d.get("zone"), "range.zone")
    _field(console, "start", f"{d.get('start_date')} {d.get('start_time')}", "range.civil")
    _field(console, "end", f"{d.get('end_date')} {d.get('end_time')}", "range.civil")
    _field(console, "days", d.get("days"))
    if verbose:
        _field(console, "start_utc", d.get("start"), "range.instant")
        _field(console, "end_utc", d.get("end"), "range.instant")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "list_zones": _render_zones,
    "zone_info": _render_zone_info,
    "to_utc": _render_conversion,
    "from_utc": _render_conversion,
    "format_in_zone": _render_formatted,
    "validate_date": _render_validation,
    "validate_range": _render_validation,
    "list_presets": _render_presets,
    "show_preset": _render_preset,
}
