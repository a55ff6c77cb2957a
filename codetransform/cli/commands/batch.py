"""Batch command - compile every row of a CSV file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.batch_compile_use_case import MissingColumnError
from ...application.models import BatchCompileRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DataSourceError
from ..helpers import MODE_CHOICE, resolve_mode
from ..presenters.batch_summary import BatchSummaryPresenter

console = Console()


@click.command()
@click.argument(
    "input_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Results CSV (default: <input>_results.csv next to the input)",
)
@click.option(
    "--mode",
    type=MODE_CHOICE,
    default=None,
    help="Mode for rows without their own mode (default: from configuration)",
)
@click.option(
    "--input-column",
    default=None,
    help="Column holding the text to compile (default: 'input')",
)
@click.option(
    "--mode-column",
    default=None,
    help="Column holding a per-row mode override (default: 'mode')",
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
def batch_command(
    input_csv: Path,
    output_file: Path | None,
    mode: str | None,
    input_column: str | None,
    mode_column: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Compile every row of INPUT_CSV and write a results CSV.

    Each row's text is read from the input column. A non-blank value in the
    mode column overrides the default mode for that row.

    Examples:

    \b
        codetransform batch inputs.csv
    \b
        codetransform batch inputs.csv --mode range --output out/results.csv
    """
    runtime_config = ConfigLoader.load(config_file=config_file)
    request = BatchCompileRequest(
        input_file=input_csv,
        default_mode=resolve_mode(mode, runtime_config),
        output_file=output_file,
        input_column=input_column or runtime_config.input_column,
        mode_column=mode_column or runtime_config.mode_column,
        encoding=runtime_config.encoding,
    )

    container = DependencyContainer(
        verbose=max(verbose, runtime_config.verbosity), console=console
    )
    use_case = container.create_batch_compile_use_case()
    try:
        response = use_case.execute(request)
    except (DataSourceError, MissingColumnError) as e:
        raise click.ClickException(str(e)) from e

    BatchSummaryPresenter(console).present(response)

    if not response.success:
        raise click.ClickException("Batch compile completed with errors")
