"""Compile command - transform text with range expansion and cipher mapping.

This module is a thin adapter between click and the TransformEngine:
1. Parse CLI arguments and configuration
2. Read the input text
3. Call the engine
4. Render the result
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from rich.console import Console

from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ..helpers import MODE_CHOICE, read_source, resolve_mode
from ..presenters.result import ResultPresenter

console = Console()


@click.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the input text from a file instead of TEXT or stdin",
)
@click.option(
    "--mode",
    type=MODE_CHOICE,
    default=None,
    help="Compile mode (default: from configuration, 'combined')",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as JSON instead of console output",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a codetransform.toml config file (default: ./codetransform.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def compile_command(
    text: str | None,
    input_file: Path | None,
    mode: str | None,
    as_json: bool,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Compile TEXT (or --file, or stdin) and print the result.

    \b
    Modes:
    - default:  no transformation
    - range:    expand X->Y tokens (A->E becomes ABCDE)
    - mapping:  apply the ROT13 + digit-swap cipher (HELLO becomes URYYB)
    - combined: expand ranges, then apply the cipher

    Examples:

    \b
        codetransform compile "A->E" --mode range
    \b
        codetransform compile --file program.txt --mode combined --json
    \b
        echo "HELLO" | codetransform compile --mode mapping
    """
    runtime_config = ConfigLoader.load(config_file=config_file)
    selected_mode = resolve_mode(mode, runtime_config)
    source = read_source(text, input_file, encoding=runtime_config.encoding)

    container = DependencyContainer(
        verbose=max(verbose, runtime_config.verbosity),
        console=console,
        use_null_logger=as_json,
    )
    engine = container.create_engine()
    if runtime_config.simulated_delay > 0:
        with console.status("[bold green]Compiling..."):
            result = asyncio.run(
                engine.compile_async(
                    source, selected_mode, delay=runtime_config.simulated_delay
                )
            )
    else:
        result = engine.compile(source, selected_mode)

    presenter = ResultPresenter(console)
    if as_json:
        presenter.present_json(result)
    else:
        presenter.present(result, mode=selected_mode)

    if not result.success:
        raise click.exceptions.Exit(1)
