"""Click base classes carrying an optional ``--examples`` flag.

Commands built with ``examples=`` get an eager ``--examples`` option that
prints the text and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Registers ``--examples`` when the command is given example text."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class InvCommand(_ExamplesMixin, click.Command):
    """Leaf command (``init``, ``serve``, entity ``create``/``update``)."""


class InvGroup(_ExamplesMixin, click.Group):
    """Entity command group; its subcommands default to :class:`InvCommand`."""

    command_class = InvCommand
