from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...domain.entities.cipher_table import CipherTableView
    from ...domain.entities.mode import Mode


class ReferencePresenter:
    """Cipher mapping reference: letters, digits and range examples."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(
        self, view: CipherTableView, examples: Sequence[tuple[str, str]]
    ) -> None:
        self.console.print(self.build_letter_table(view))
        self.console.print()
        self.console.print(self.build_digit_table(view))
        fixed = " and ".join(view.fixed_digits)
        if fixed:
            self.console.print(f"[dim]* Numbers {fixed} remain unchanged[/dim]")
        self.console.print()
        self.console.print(self.build_examples_table(examples))

    def present_modes(self, modes: Sequence[Mode]) -> None:
        table = Table(title="Compile Modes", header_style="bold cyan")
        table.add_column("Mode", style="cyan", no_wrap=True)
        table.add_column("Label")
        table.add_column("Description", style="dim")
        for mode in modes:
            table.add_row(mode.value, mode.label, mode.description)
        self.console.print(table)

    @staticmethod
    def build_letter_table(view: CipherTableView) -> Table:
        table = Table(
            title="Letter Mapping (ROT13)",
            header_style="bold cyan",
            show_lines=False,
        )
        table.add_column("From", style="white", justify="center")
        table.add_column("To", style="green", justify="center")
        table.add_column("From", style="white", justify="center")
        table.add_column("To", style="green", justify="center")
        items = list(view.letters.items())
        half = (len(items) + 1) // 2
        for index in range(half):
            left = items[index]
            right = items[index + half] if index + half < len(items) else ("", "")
            table.add_row(left[0], left[1], right[0], right[1])
        return table

    @staticmethod
    def build_digit_table(view: CipherTableView) -> Table:
        table = Table(title="Number Mapping", header_style="bold cyan")
        row = view.digit_row()
        for digit, _mapped in row:
            table.add_column(digit, justify="center")
        table.add_row(*(mapped for _digit, mapped in row), style="yellow")
        return table

    @staticmethod
    def build_examples_table(examples: Sequence[tuple[str, str]]) -> Table:
        table = Table(title="Range Expansion Examples", header_style="bold cyan")
        table.add_column("Input", style="white")
        table.add_column("Output", style="green")
        for source, expanded in examples:
            table.add_row(source, expanded)
        return table
