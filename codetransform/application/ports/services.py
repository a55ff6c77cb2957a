from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ...domain.entities.mode import Mode
    from ...domain.entities.transform_result import TransformResult


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def log_compile_start(self, mode: Mode, input_length: int) -> None: ...

    def log_compile_complete(self, mode: Mode, result: TransformResult) -> None: ...

    def log_batch_start(self, source: Path, row_count: int) -> None: ...

    def log_batch_row(self, row_number: int, result: TransformResult) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class CSVReaderPort(Protocol):
    pass

    def read(self, path: Path, *, encoding: str = "utf-8") -> pd.DataFrame: ...


@runtime_checkable
class ResultWriterPort(Protocol):
    pass

    def write(self, frame: pd.DataFrame, path: Path, *, encoding: str = "utf-8") -> Path: ...
