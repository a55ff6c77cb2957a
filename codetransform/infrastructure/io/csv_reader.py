from __future__ import annotations

from typing import TYPE_CHECKING, override

import pandas as pd

from ...application.ports.services import CSVReaderPort
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


class CSVReader(CSVReaderPort):
    """Read batch input files as all-string frames.

    Empty cells stay empty strings so that blank inputs reach the engine as
    blank text rather than as NaN.
    """

    @override
    def read(self, path: Path, *, encoding: str = "utf-8") -> pd.DataFrame:
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding=encoding,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except Exception as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        df.columns = [str(col).strip() for col in df.columns]
        return df
