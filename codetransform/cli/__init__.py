import click

from .commands.batch import batch_command
from .commands.compile import compile_command
from .commands.demo import demo_command
from .commands.reference import list_modes_command, reference_command


@click.group()
@click.version_option(package_name="codetransform")
def app() -> None:
    """Range expansion and cipher mapping for text."""


app.add_command(compile_command, name="compile")
app.add_command(batch_command, name="batch")
app.add_command(reference_command, name="reference")
app.add_command(list_modes_command, name="modes")
app.add_command(demo_command, name="demo")
__all__ = ["app"]
