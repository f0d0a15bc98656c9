"""Click base classes that carry usage examples.

``RosterCommand`` and ``RosterGroup`` take an ``examples=`` string. Such
commands gain an eager ``--examples`` flag that prints the examples and
exits, and their ``--help`` ends with a one-line pointer to it.
"""

from __future__ import annotations

from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples to see usage examples."


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Shared ``examples=`` handling for commands and groups."""

    examples: str | None

    def _setup_examples(self, examples: str | None, kwargs: dict[str, Any]) -> None:
        self.examples = examples
        if examples and not kwargs.get("epilog"):
            kwargs["epilog"] = _EXAMPLES_HINT

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params: list[click.Parameter] = super().get_params(ctx)  # type: ignore[misc]
        if not self.examples:
            return params
        flag = click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_print_examples,
            help="Show usage examples.",
        )
        return [*params, flag]


class RosterCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self._setup_examples(examples, kwargs)
        super().__init__(*args, **kwargs)


class RosterGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`RosterCommand`."""

    command_class = RosterCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self._setup_examples(examples, kwargs)
        super().__init__(*args, **kwargs)
