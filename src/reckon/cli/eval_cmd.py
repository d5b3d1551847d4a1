"""Evaluate an expression tree described in YAML or JSON."""

import click
import yaml

from reckon.config import EvaluationConfig, Settings
from reckon.expressions import (
    DeadlineInterrupt,
    EvaluationError,
    Interrupted,
    NeverInterrupt,
    Scope,
    TreeError,
    evaluate,
    format_tree,
    node_from_data,
)


@click.command("eval")
@click.argument("source", type=click.File("r"))
@click.option(
    "--compat/--no-compat",
    default=None,
    help="Use the reduced compatibility builtin table.",
)
@click.option(
    "--timeout",
    "timeout_ms",
    default=None,
    type=click.IntRange(min=1),
    help="Cancel the evaluation after this many milliseconds.",
)
@click.option("--tree", "show_tree", is_flag=True, default=False, help="Print the parsed tree.")
@click.pass_obj
def eval_cmd(
    settings: Settings | None,
    source,
    compat: bool | None,
    timeout_ms: int | None,
    show_tree: bool,
):
    """Evaluate the expression tree in SOURCE (a file, or - for stdin).

    \b
    Example document:
        as: [255, hex]
    """
    settings = settings or Settings()

    try:
        node = node_from_data(yaml.safe_load(source))
    except yaml.YAMLError as e:
        click.echo(click.style(f"Error: invalid YAML: {e}", fg="red"), err=True)
        raise SystemExit(1)
    except TreeError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if show_tree:
        click.echo(format_tree(node))

    config = EvaluationConfig(
        compatibility_mode=settings.compatibility_mode if compat is None else compat
    )
    timeout_ms = timeout_ms or settings.timeout_ms
    interrupt = DeadlineInterrupt(timeout_ms) if timeout_ms else NeverInterrupt()

    try:
        value = evaluate(node, Scope(), config, interrupt)
    except Interrupted:
        click.echo(click.style("Computation cancelled", fg="yellow"), err=True)
        raise SystemExit(130)
    except EvaluationError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(str(value))
