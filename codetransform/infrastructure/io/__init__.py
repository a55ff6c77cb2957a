"""File I/O adapters for batch compilation."""

from .csv_reader import CSVReader
from .exceptions import (
    CodeTransformInfrastructureError,
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataWriteError,
)
from .results_writer import CSVResultWriter

__all__ = [
    "CSVReader",
    "CSVResultWriter",
    "CodeTransformInfrastructureError",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataWriteError",
]
