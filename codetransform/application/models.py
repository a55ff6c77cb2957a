from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ..domain.entities.mode import Mode
    from ..domain.entities.transform_result import TransformResult


def _empty_row_results() -> list[BatchRowResult]:
    return []


@dataclass(slots=True)
class BatchCompileRequest:
    input_file: Path
    default_mode: Mode
    output_file: Path | None = None
    input_column: str = Defaults.INPUT_COLUMN
    mode_column: str = Defaults.MODE_COLUMN
    encoding: str = Defaults.ENCODING

    @property
    def resolved_output_file(self) -> Path:
        if self.output_file is not None:
            return self.output_file
        return self.input_file.with_name(
            f"{self.input_file.stem}{Defaults.RESULTS_SUFFIX}.csv"
        )


@dataclass(slots=True)
class BatchRowResult:
    row_number: int
    input_text: str
    mode: str
    result: TransformResult


@dataclass(slots=True)
class BatchCompileResponse:
    output_file: Path | None = None
    rows: list[BatchRowResult] = field(default_factory=_empty_row_results)
    frame: pd.DataFrame | None = None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def failed_count(self) -> int:
        return sum(1 for row in self.rows if not row.result.success)

    @property
    def succeeded_count(self) -> int:
        return self.row_count - self.failed_count

    @property
    def total_ranges_expanded(self) -> int:
        return sum(row.result.stats.ranges_expanded for row in self.rows)

    @property
    def total_chars_transformed(self) -> int:
        return sum(row.result.stats.chars_transformed for row in self.rows)

    @property
    def success(self) -> bool:
        return self.failed_count == 0
