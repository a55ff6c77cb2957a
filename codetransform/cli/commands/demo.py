import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ...application.transform_engine import TransformEngine
from ...constants import Defaults
from ...domain.entities.mode import Mode
from ..helpers import MODE_CHOICE
from ..presenters.result import ResultPresenter

console = Console()


@click.command()
@click.option(
    "--mode",
    type=MODE_CHOICE,
    default=Defaults.MODE,
    show_default=True,
    help="Compile mode for the example input",
)
def demo_command(mode: str) -> None:
    """Compile the built-in example input and show the result."""
    selected_mode = Mode.parse(mode)
    console.print(Panel(Text(Defaults.EXAMPLE_INPUT), title="Input"))
    result = TransformEngine().compile(Defaults.EXAMPLE_INPUT, selected_mode)
    ResultPresenter(console).present(result, mode=selected_mode)
