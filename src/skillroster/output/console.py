"""Rich Console factory and theme for skillroster output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROSTER_THEME = Theme(
    {
        "roster.ok": "bold green",
        "roster.error": "bold red",
        "roster.warning": "bold yellow",
        "roster.op": "bold cyan",
        "roster.key": "dim",
        "roster.id": "bold blue",
        "roster.name": "bold",
        "roster.role.employee": "green",
        "roster.role.admin": "magenta",
        "roster.role.manager": "yellow",
    }
)

_ROLE_STYLES: dict[str, str] = {
    "employee": "roster.role.employee",
    "admin": "roster.role.admin",
    "manager": "roster.role.manager",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_role(role: str) -> str:
    """Return the Rich style name for a role."""
    return _ROLE_STYLES.get(role, "")
