from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.mode import Mode
    from ...domain.entities.transform_result import TransformResult


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    mode: str = ""


def _empty_stats() -> dict[str, int]:
    return {
        "compilations": 0,
        "ranges_expanded": 0,
        "chars_transformed": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context = LogContext()
        self._stats: dict[str, int] = _empty_stats()

    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def log_compile_start(self, mode: Mode, input_length: int) -> None:
        self._context.mode = mode.value
        self.verbose(f"Compiling {input_length:,} characters in {mode.label} mode")

    @override
    def log_compile_complete(self, mode: Mode, result: TransformResult) -> None:
        self._stats["compilations"] += 1
        self._stats["ranges_expanded"] += result.stats.ranges_expanded
        self._stats["chars_transformed"] += result.stats.chars_transformed
        self._stats["warnings"] += len(result.warnings)
        self._stats["errors"] += len(result.errors)
        self.debug(
            f"  {mode.label}: {result.stats.ranges_expanded} range(s) expanded, "
            f"{result.stats.chars_transformed} character(s) transformed"
        )
        if result.errors:
            self.debug(f"  {len(result.errors)} malformed range token(s)")

    @override
    def log_batch_start(self, source: Path, row_count: int) -> None:
        self._context.source = source.name
        self.console.print(
            f"[bold]Compiling {row_count:,} rows from {escape(source.name)}[/bold]"
        )

    @override
    def log_batch_row(self, row_number: int, result: TransformResult) -> None:
        if result.success:
            self.debug(f"  Row {row_number}: ok")
            return
        self.verbose(f"  Row {row_number}: {len(result.errors)} error(s)")
        for message in result.errors:
            self.debug(f"    {message}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Compile Statistics:[/dim]")
            self.console.print(
                f"[dim]  Compilations: {self._stats['compilations']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Ranges expanded: {self._stats['ranges_expanded']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Characters transformed: {self._stats['chars_transformed']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def _get_prefix(self) -> str:
        if self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [part for part in (self._context.source, self._context.mode) if part]
        return escape(f"[{':'.join(parts)}] ") if parts else ""
