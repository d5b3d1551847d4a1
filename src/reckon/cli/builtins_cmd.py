"""Builtin table listing commands."""

import json

import click

from reckon.config import EvaluationConfig, Settings
from reckon.expressions import FunctionCategory, FunctionRegistry, builtin_names


@click.command("builtins")
@click.option(
    "--compat/--no-compat",
    default=None,
    help="List the compatibility table instead of the default one.",
)
@click.pass_obj
def builtins_cmd(settings: Settings | None, compat: bool | None):
    """List builtin identifiers of a mode."""
    settings = settings or Settings()
    compatibility_mode = settings.compatibility_mode if compat is None else compat
    names = builtin_names(EvaluationConfig(compatibility_mode=compatibility_mode))

    mode = "compatibility" if compatibility_mode else "default"
    click.echo(f"{len(names)} builtin identifiers ({mode} mode):")
    for name in names:
        click.echo(f"  {name}")


@click.command("functions")
@click.option("--json", "as_json", is_flag=True, help="Print the registry as JSON.")
def functions_cmd(as_json: bool):
    """List builtin functions by category."""
    if as_json:
        click.echo(json.dumps(FunctionRegistry.export_documentation(), indent=2))
        return
    for category in FunctionCategory:
        definitions = FunctionRegistry.list_by_category(category)
        if not definitions:
            continue
        click.echo(click.style(category.value.capitalize(), bold=True))
        for func_def in sorted(definitions, key=lambda f: f.name):
            click.echo(f"  {func_def.name:<14} {func_def.description}")
