from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import BatchCompileResponse

ERROR_DETAIL_LIMIT = 10


class BatchSummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: BatchCompileResponse) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(response))
        self.console.print()
        if response.success:
            self.console.print(
                f"[bold green]✓ All {response.row_count} rows compiled successfully[/bold green]"
            )
        else:
            self.console.print(
                f"[bold yellow]⚠ {response.failed_count} of {response.row_count} "
                "rows compiled with errors[/bold yellow]"
            )
            self._print_error_details(response)
        if response.output_file is not None:
            self.console.print(
                f"[bold]Results:[/bold] {escape(str(response.output_file))}"
            )

    def _build_summary_table(self, response: BatchCompileResponse) -> Table:
        table = Table(
            title="Batch Compile Summary",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Metric", style="cyan", no_wrap=True)
        table.add_column("Value", justify="right", style="yellow")
        table.add_row("Rows", f"{response.row_count:,}")
        table.add_row("Succeeded", f"{response.succeeded_count:,}")
        table.add_row("With errors", f"{response.failed_count:,}")
        table.add_row("Ranges expanded", f"{response.total_ranges_expanded:,}")
        table.add_row(
            "Characters transformed", f"{response.total_chars_transformed:,}"
        )
        return table

    def _print_error_details(self, response: BatchCompileResponse) -> None:
        failed = [row for row in response.rows if not row.result.success]
        for row in failed[:ERROR_DETAIL_LIMIT]:
            for message in row.result.errors:
                self.console.print(
                    f"  [red]✗[/red] Row {row.row_number}: {escape(message)}"
                )
        remaining = len(failed) - ERROR_DETAIL_LIMIT
        if remaining > 0:
            self.console.print(f"  [dim]... and {remaining} more row(s)[/dim]")
