from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ..domain.entities.mode import Mode

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import TransformConfig

MODE_CHOICE = click.Choice(Mode.choices(), case_sensitive=False)


def resolve_mode(option_value: str | None, config: TransformConfig) -> Mode:
    if option_value:
        return Mode.parse(option_value)
    return config.mode


def read_source(text: str | None, input_file: Path | None, *, encoding: str) -> str:
    """Return the text to compile from the argument, a file, or stdin."""
    if text is not None and input_file is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if text is not None:
        return text
    if input_file is not None:
        try:
            return input_file.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise click.ClickException(f"Could not read {input_file}: {e}") from e
    return click.get_text_stream("stdin").read()
