from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from .models import BatchCompileResponse, BatchRowResult

if TYPE_CHECKING:
    from .models import BatchCompileRequest
    from .ports.services import CSVReaderPort, LoggerPort, ResultWriterPort
    from .transform_engine import TransformEngine

RESULT_COLUMNS = (
    "row",
    "input",
    "mode",
    "success",
    "output",
    "errors",
    "warnings",
    "ranges_expanded",
    "chars_transformed",
    "execution_time_ms",
)
MESSAGE_SEPARATOR = " | "


class MissingColumnError(ValueError):
    pass


@dataclass(slots=True)
class BatchCompileDependencies:
    logger: LoggerPort
    engine: TransformEngine
    csv_reader: CSVReaderPort
    result_writer: ResultWriterPort


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value)


class BatchCompileUseCase:
    """Compile every row of a CSV file and write a results CSV.

    Each row supplies the text to compile in the input column. When the file
    has a mode column, a non-blank value there overrides the request's default
    mode for that row; an unknown mode is reported in that row's errors.
    """

    def __init__(self, dependencies: BatchCompileDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._engine = dependencies.engine
        self._csv_reader = dependencies.csv_reader
        self._result_writer = dependencies.result_writer

    def execute(self, request: BatchCompileRequest) -> BatchCompileResponse:
        frame = self._csv_reader.read(request.input_file, encoding=request.encoding)
        if request.input_column not in frame.columns:
            available = ", ".join(str(column) for column in frame.columns)
            raise MissingColumnError(
                f"Column '{request.input_column}' not found in {request.input_file} "
                f"(available: {available})"
            )
        self.logger.log_batch_start(request.input_file, len(frame))

        has_mode_column = request.mode_column in frame.columns
        rows: list[BatchRowResult] = []
        for row_number, record in enumerate(frame.to_dict("records"), start=1):
            text = _cell_text(record.get(request.input_column))
            mode = ""
            if has_mode_column:
                mode = _cell_text(record.get(request.mode_column)).strip()
            mode = mode or request.default_mode.value
            result = self._engine.compile(text, mode)
            self.logger.log_batch_row(row_number, result)
            rows.append(
                BatchRowResult(
                    row_number=row_number, input_text=text, mode=mode, result=result
                )
            )

        results_frame = self.build_results_frame(rows)
        output_file = self._result_writer.write(
            results_frame, request.resolved_output_file, encoding=request.encoding
        )
        self.logger.log_final_stats()
        return BatchCompileResponse(
            output_file=output_file, rows=rows, frame=results_frame
        )

    @staticmethod
    def build_results_frame(rows: list[BatchRowResult]) -> pd.DataFrame:
        records = [
            {
                "row": row.row_number,
                "input": row.input_text,
                "mode": row.mode,
                "success": row.result.success,
                "output": row.result.output,
                "errors": MESSAGE_SEPARATOR.join(row.result.errors),
                "warnings": MESSAGE_SEPARATOR.join(row.result.warnings),
                "ranges_expanded": row.result.stats.ranges_expanded,
                "chars_transformed": row.result.stats.chars_transformed,
                "execution_time_ms": row.result.stats.execution_time_ms,
            }
            for row in rows
        ]
        return pd.DataFrame.from_records(records, columns=list(RESULT_COLUMNS))
