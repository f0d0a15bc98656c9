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

from skillroster.output.console import create_console, get_output, style_for_role

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from skillroster.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="roster.ok")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="roster.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="roster.id")
    elif key == "name":
        v = Text(str(value), style="roster.name")
    elif key in ("role", "role_type"):
        v = Text(str(value), style=style_for_role(str(value)))
    elif isinstance(value, list):
        v = Text(", ".join(str(item) for item in value))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _profile_table(items: list[dict[str, Any]], *, with_match: bool = False) -> Table:
    """Build a Rich Table for a list of decorated profiles."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="roster.id", no_wrap=True)
    table.add_column("Name", style="roster.name")
    table.add_column("Role")
    table.add_column("Skills")
    if with_match:
        table.add_column("Has Skill")
    table.add_column("Summary")

    for item in items:
        role = str(item.get("role_type", item.get("role", "")))
        row: list[str | Text] = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            Text(role, style=style_for_role(role)),
            ", ".join(item.get("skills", [])),
        ]
        if with_match:
            row.append("yes" if item.get("has_skill") else "no")
        row.append(str(item.get("summary", "")))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="roster.error")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op, Text(" — "), msg)

    if err is not None:
        console.print(Text(f"  code: {err.code} ({err.status})", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Profile renderers ─────────────────────────────────────────────────


def _render_profile(result: ServiceResult, console: Console) -> None:
    """Render create/get/replace results as one decorated profile."""
    _status_line(console, result)
    for key in ("id", "name", "role_type", "team_size", "skills", "summary", "created_at"):
        if key in result.data and result.data[key] is not None:
            _field(console, key, result.data[key])
    if result.data.get("can_manage_users"):
        _field(console, "can_manage_users", True)


def _render_profile_list(result: ServiceResult, console: Console) -> None:
    """Render list/search results as a table."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if "query" in result.data:
        _field(console, "query", result.data["query"])
    _field(console, "count", result.data.get("count", len(items)))
    if items:
        console.print(_profile_table(items, with_match=result.op == "search_profiles"))


# ── Skill renderers ───────────────────────────────────────────────────


def _render_skill_list(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    _field(console, "count", result.data.get("count", len(items)))
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("ID", style="roster.id", no_wrap=True)
        table.add_column("Name", style="roster.name")
        table.add_column("Created", style="dim")
        for item in items:
            table.add_row(str(item["id"]), str(item["name"]), str(item.get("created_at", "")))
        console.print(table)


def _render_deleted(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "message", result.data.get("message", ""))
    deleted = result.data.get("deleted") or {}
    for key in ("id", "name", "role"):
        if key in deleted:
            _field(console, key, deleted[key])


# ── Schema renderers ──────────────────────────────────────────────────


def _render_migration(result: ServiceResult, console: Console) -> None:
    """Render ``upgrade`` results: a pending-revision table or what was applied."""
    _status_line(console, result)
    data = result.data
    if "pending" not in data:
        _field(console, "revision", data.get("current"))
        _field(console, "applied", data.get("applied_count", 0))
        if data.get("message"):
            _field(console, "message", data["message"])
        return

    _field(console, "schema", f"{data.get('current') or 'untracked'} -> {data.get('head')}")
    pending = data["pending"]
    if not pending:
        _field(console, "pending", "none, schema is current")
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Revision", style="roster.id", no_wrap=True)
    table.add_column("Description")
    for rev in reversed(pending):
        table.add_row(str(rev["revision"]), str(rev.get("description", "")))
    console.print(table)
    _field(console, "pending", len(pending))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "create_profile": _render_profile,
    "get_profile": _render_profile,
    "replace_skills": _render_profile,
    "list_profiles": _render_profile_list,
    "search_profiles": _render_profile_list,
    "delete_profile": _render_deleted,
    "list_skills": _render_skill_list,
    "create_skill": _render_generic,
    "delete_skill": _render_deleted,
    "upgrade": _render_migration,
}
