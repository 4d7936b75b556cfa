"""rich-click command line surface.

Purpose
-------
Let operators preview the handler output from a shell: print the package
banner, emit one demo line per severity, or show the icon table.

Contents
--------
* :func:`cli` - root command group (``--version``, defaults to ``info``).
* ``info``, ``logdemo`` and ``icons`` subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich_click as click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from .domain import DEFAULT_TIME_FORMAT, Destination, IconStyle
from .lib_log_colors import icon_rows, logdemo as _logdemo, summary_info


CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Colored, iconified console handler for Python logging."""

    if version:
        click.echo(f"{__init__conf__.shell_command} version {__init__conf__.version}")
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


def _parse_meta(_ctx: click.Context, _param: click.Parameter, values: Sequence[str]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in values:
        key, separator, value = item.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        parsed[key] = value
    return parsed


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--style",
    type=click.Choice([style.value for style in IconStyle], case_sensitive=False),
    default=IconStyle.COOL.value,
    show_default=True,
    help="Icon style used for the demo lines.",
)
@click.option("--stderr", "to_stderr", is_flag=True, help="Write to stderr instead of stdout.")
@click.option("--time-format", default=DEFAULT_TIME_FORMAT, show_default=True, help="strftime pattern for timestamps.")
@click.option("--label", default="logdemo", show_default=True, help="Label printed on every line.")
@click.option("--meta", "metadata", multiple=True, callback=_parse_meta, metavar="KEY=VALUE", help="Metadata attached to every line.")
def cli_logdemo(style: str, to_stderr: bool, time_format: str, label: str, metadata: dict[str, str]) -> None:
    """Emit one line per severity through a real handler."""

    destination = Destination.STDERR if to_stderr else Destination.STDOUT
    result = _logdemo(
        style=style,
        destination=destination,
        time_format=time_format,
        label=label,
        metadata=metadata,
    )
    written = sum(1 for ok in result["written"] if ok)
    click.echo(f"emitted {written}/{len(result['written'])} lines to {result['destination']} ({result['style']})", err=to_stderr)


@cli.command("icons", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_icons() -> None:
    """Show the glyph used for each severity and style."""

    table = Table(title="Severity icons")
    table.add_column("severity")
    for style in IconStyle:
        table.add_column(style.value, justify="center")
    for row in icon_rows():
        table.add_row(*row)
    Console().print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_colors version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return result if isinstance(result, int) else 0


__all__ = ["cli", "main"]
