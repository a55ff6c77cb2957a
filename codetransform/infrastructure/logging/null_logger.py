from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.mode import Mode
    from ...domain.entities.transform_result import TransformResult


class NullLogger(LoggerPort):
    pass

    @override
    def log_compile_start(self, mode: Mode, input_length: int) -> None:
        return None

    @override
    def log_compile_complete(self, mode: Mode, result: TransformResult) -> None:
        return None

    @override
    def log_batch_start(self, source: Path, row_count: int) -> None:
        return None

    @override
    def log_batch_row(self, row_number: int, result: TransformResult) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
