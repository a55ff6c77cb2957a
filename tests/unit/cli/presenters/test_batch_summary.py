"""Unit tests for BatchSummaryPresenter."""

from pathlib import Path

from codetransform.application.models import BatchCompileResponse, BatchRowResult
from codetransform.cli.presenters import BatchSummaryPresenter
from codetransform.domain.entities.transform_result import (
    TransformResult,
    TransformStats,
)


def _row(number: int, errors=None, ranges: int = 0) -> BatchRowResult:
    return BatchRowResult(
        row_number=number,
        input_text="A->E",
        mode="range",
        result=TransformResult(
            output="ABCDE",
            errors=list(errors or []),
            stats=TransformStats(ranges_expanded=ranges),
        ),
    )


class TestBatchSummaryPresenter:
    def test_all_rows_succeeded(self, console, buffer):
        response = BatchCompileResponse(
            output_file=Path("codes_results.csv"),
            rows=[_row(1, ranges=1), _row(2, ranges=2)],
        )

        BatchSummaryPresenter(console).present(response)

        output = buffer.getvalue()
        assert "Batch Compile Summary" in output
        assert "Ranges expanded" in output
        assert "✓ All 2 rows compiled successfully" in output
        assert "Results: codes_results.csv" in output

    def test_rows_with_errors(self, console, buffer):
        response = BatchCompileResponse(
            rows=[_row(1), _row(2, errors=["Invalid range: bad"])],
        )

        BatchSummaryPresenter(console).present(response)

        output = buffer.getvalue()
        assert "⚠ 1 of 2 rows compiled with errors" in output
        assert "✗ Row 2: Invalid range: bad" in output
        assert "Results:" not in output

    def test_error_details_are_capped(self, console, buffer):
        rows = [_row(number, errors=[f"error {number}"]) for number in range(1, 13)]

        BatchSummaryPresenter(console).present(BatchCompileResponse(rows=rows))

        output = buffer.getvalue()
        assert "Row 10: error 10" in output
        assert "Row 11: error 11" not in output
        assert "... and 2 more row(s)" in output
