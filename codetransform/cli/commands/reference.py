import click
from rich.console import Console

from ...application.transform_engine import TransformEngine
from ...constants import Patterns
from ...domain.entities.mode import Mode
from ..presenters.reference import ReferencePresenter

console = Console()


@click.command()
def reference_command() -> None:
    """Show the cipher mapping table and range expansion examples."""
    engine = TransformEngine()
    examples = [
        (example, engine.compile(example, Mode.RANGE).output)
        for example in Patterns.RANGE_EXAMPLES
    ]
    ReferencePresenter(console).present(engine.get_cipher_table(), examples)


@click.command()
def list_modes_command() -> None:
    """List the available compile modes."""
    ReferencePresenter(console).present_modes(list(Mode))
