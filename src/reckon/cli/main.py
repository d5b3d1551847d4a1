"""Reckon CLI entry point."""

import logging

import click

from reckon.config import ConfigError, load_settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Reckon: calculator expression evaluator CLI."""
    try:
        settings = load_settings()
    except ConfigError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


# Register subcommands
from reckon.cli.builtins_cmd import builtins_cmd, functions_cmd  # noqa: E402
from reckon.cli.eval_cmd import eval_cmd  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(builtins_cmd)
cli.add_command(functions_cmd)
