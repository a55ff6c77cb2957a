from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.entities.mode import Mode
    from ...domain.entities.transform_result import TransformResult


class ResultPresenter:
    """Render a compile result the way the output console shows it."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, result: TransformResult, *, mode: Mode | None = None) -> None:
        self._print_header(result, mode)
        for message in result.errors:
            self.console.print(f"[red]✗[/red] [red]{escape(message)}[/red]")
        for message in result.warnings:
            self.console.print(f"[yellow]⚠[/yellow] [yellow]{escape(message)}[/yellow]")
        self._print_stats(result)
        if result.output:
            line = Text("> ", style="bold green")
            line.append(result.output)
            self.console.print(line)

    def present_json(self, result: TransformResult) -> None:
        self.console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))

    def _print_header(self, result: TransformResult, mode: Mode | None) -> None:
        status = (
            "[green]✓ Success[/green]" if result.success else "[red]✗ Errors[/red]"
        )
        header = "[bold]Output[/bold]"
        if mode is not None:
            header += f" [dim]({mode.label})[/dim]"
        header += f"  [dim]{result.stats.execution_time_ms:.2f}ms[/dim]  {status}"
        self.console.print(header)

    def _print_stats(self, result: TransformResult) -> None:
        if result.stats.ranges_expanded > 0:
            self.console.print(
                f"[dim]→ Ranges expanded: {result.stats.ranges_expanded}[/dim]"
            )
        if result.stats.chars_transformed > 0:
            self.console.print(
                f"[dim]→ Characters transformed: {result.stats.chars_transformed}[/dim]"
            )
