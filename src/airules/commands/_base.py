"""Custom Click base classes with --examples support and query fallback.

Provides RulesCommand and RulesGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
RulesGroup also routes any word that is not a subcommand to a default
command, so ``airules ascii`` means ``airules show ascii``.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RulesCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class RulesGroup(click.Group):
    """Click Group subclass with ``--examples`` and a fallback command.

    Sets ``command_class = RulesCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    When *default_command* is set, an argument that names no subcommand
    is handed to that command instead of failing with "No such command".
    """

    command_class = RulesCommand

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.default_command = default_command
        if examples:
            _add_examples_option(self, examples)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if self.default_command and args and not args[0].startswith("-"):
            if self.get_command(ctx, args[0]) is None:
                fallback = self.get_command(ctx, self.default_command)
                if fallback is not None:
                    return self.default_command, fallback, args
        return super().resolve_command(ctx, args)
