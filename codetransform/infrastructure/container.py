from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.batch_compile_use_case import (
    BatchCompileDependencies,
    BatchCompileUseCase,
)
from ..application.transform_engine import TransformEngine
from ..domain.entities.cipher_table import DEFAULT_CIPHER_TABLE
from .io.csv_reader import CSVReader
from .io.results_writer import CSVResultWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        CSVReaderPort,
        LoggerPort,
        ResultWriterPort,
    )
    from ..domain.entities.cipher_table import CipherTable


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        table: CipherTable = DEFAULT_CIPHER_TABLE,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.table = table
        self._logger_instance: LoggerPort | None = None
        self._engine_instance: TransformEngine | None = None
        self._csv_reader_instance: CSVReaderPort | None = None
        self._result_writer_instance: ResultWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_engine(self) -> TransformEngine:
        if self._engine_instance is None:
            self._engine_instance = TransformEngine(
                self.table, logger=self.create_logger()
            )
        return self._engine_instance

    def create_csv_reader(self) -> CSVReaderPort:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_result_writer(self) -> ResultWriterPort:
        if self._result_writer_instance is None:
            self._result_writer_instance = CSVResultWriter()
        return self._result_writer_instance

    def create_batch_compile_use_case(self) -> BatchCompileUseCase:
        dependencies = BatchCompileDependencies(
            logger=self.create_logger(),
            engine=self.create_engine(),
            csv_reader=self.create_csv_reader(),
            result_writer=self.create_result_writer(),
        )
        return BatchCompileUseCase(dependencies)
