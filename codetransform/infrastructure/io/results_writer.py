from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import ResultWriterPort
from .exceptions import DataWriteError

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


class CSVResultWriter(ResultWriterPort):
    pass

    @override
    def write(
        self, frame: pd.DataFrame, path: Path, *, encoding: str = "utf-8"
    ) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            frame.to_csv(path, index=False, encoding=encoding)
        except OSError as e:
            raise DataWriteError(f"Failed to write results to {path}: {e}") from e
        return path
