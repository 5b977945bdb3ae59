"""Console entry point for inspecting and demonstrating Bark.

Purpose
-------
Expose ``python -m lib_log_bark`` and the ``lib_log_bark`` console script so
operators can check the installed version, see how the default dispatcher is
configured by their environment, and preview the console output format.

Contents
--------
* :func:`cli` - Click group with ``--use-dotenv`` and ``--version``.
* ``info`` / ``status`` / ``demo`` subcommands.
* :func:`main` - integrates the Click runner with doctests and packaging.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as bark_config
from .adapters.trainers.console import colored_console_trainer
from .domain.levels import Level
from .runtime import build_bark, current_bark

_LEVEL_NAMES = [level.name for level in Level]


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load BARK_* variables from the nearest .env file (overrides {bark_config.DOTENV_ENV_VAR}).",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, *, use_dotenv: bool | None, version: bool) -> None:
    """Inspect and demonstrate the Bark logging facade."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if bark_config.should_use_dotenv(use_dotenv, os.environ.get(bark_config.DOTENV_ENV_VAR)):
        bark_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command()
def info() -> None:
    """Print the package metadata banner."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command()
def status() -> None:
    """Print the status of the default dispatcher as configured by the environment."""

    click.echo(current_bark().status(), nl=False)


@cli.command()
@click.option(
    "--volume",
    type=click.Choice(_LEVEL_NAMES, case_sensitive=False),
    default=Level.VERBOSE.name,
    show_default=True,
    help="Minimum level printed by the demo trainer.",
)
@click.option("--tag", default=None, help="Global tag; auto-detection applies when omitted.")
@click.option("--timestamp/--no-timestamp", default=True, show_default=True, help="Prefix lines with HH:MM:SS.mmm.")
@click.option("--color/--no-color", default=None, help="Force colour on or off (auto-detected by default).")
def demo(volume: str, tag: str | None, timestamp: bool, color: bool | None) -> None:
    """Bark one message per level through a coloured console trainer."""

    bark = build_bark()
    bark.register(
        colored_console_trainer(
            Level.from_name(volume),
            show_timestamp=timestamp,
            tests_only=False,
            colorize=color,
        )
    )
    if tag is not None:
        bark.set_tag(tag)
    try:
        raise RuntimeError("demo failure")
    except RuntimeError as exc:
        sample = exc
    for level in Level:
        error = sample if level >= Level.ERROR else None
        bark.log(level, f"{level.name.lower()} bark", error)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code on usage errors.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
