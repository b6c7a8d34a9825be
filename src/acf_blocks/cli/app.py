"""
acf-blocks CLI application.

Commands:
- inspect: Summarise the modules and categories a definition declares
- dump: Emit the block and field group records as JSON
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from acf_blocks.cli.utils import (
    build_definition,
    configure_logging,
    records_to_json,
    resolve_options,
    version_callback,
)
from acf_blocks.core.errors import AcfBlocksError

app = typer.Typer(
    help="Declare custom field modules once and use them as editor blocks",
    no_args_is_help=True,
)

console = Console()

DefinitionArg = Annotated[
    Path,
    typer.Argument(help="Python file providing a define(builder) function"),
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="acf-blocks.toml to read options from"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Log builder activity")]


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """acf-blocks CLI main callback for global options."""
    pass


@app.command()
def inspect(definition: DefinitionArg, config: ConfigOpt = None, verbose: VerboseOpt = False) -> None:
    """
    Show the modules and block categories a definition file declares.

    Examples:
        acf-blocks inspect blocks.py
        acf-blocks inspect blocks.py --config site/acf-blocks.toml
    """
    configure_logging(verbose)
    try:
        result = build_definition(definition, resolve_options(definition, config))
    except AcfBlocksError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    modules = Table(title="Modules")
    modules.add_column("Key", style="cyan")
    modules.add_column("Title")
    modules.add_column("Category")
    modules.add_column("Block")
    modules.add_column("Controls", justify="right")
    for module in result.builder.modules:
        modules.add_row(
            module.key, module.title, module.category, module.block_id, str(len(module.controls))
        )
    console.print(modules)

    categories = Table(title="Block categories")
    categories.add_column("Slug", style="cyan")
    categories.add_column("Title")
    for category in result.builder.categories:
        categories.add_row(category.slug, category.title)
    console.print(categories)

    if result.builder.options.restrict_block_categories:
        console.print("[yellow]Block picker restricted to the blocks above[/yellow]")


@app.command()
def dump(
    definition: DefinitionArg,
    config: ConfigOpt = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file (default: stdout)")
    ] = None,
    verbose: VerboseOpt = False,
) -> None:
    """
    Emit the block and field group records of a definition file as JSON.

    Examples:
        acf-blocks dump blocks.py
        acf-blocks dump blocks.py -o records.json
    """
    configure_logging(verbose)
    try:
        result = build_definition(definition, resolve_options(definition, config))
    except AcfBlocksError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    content = records_to_json(result.host)
    if output:
        output.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Records written to {output}")
    else:
        typer.echo(content)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)
