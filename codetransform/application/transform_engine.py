"""Compile orchestration.

``TransformEngine.compile`` is the single entry point used by every caller.
It short-circuits blank input, runs the stages that apply to the selected
mode (range expansion always before cipher mapping), and assembles a
``TransformResult``. It never raises: unexpected failures are folded into the
result as an ``Unexpected error`` diagnostic.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from ..constants import Messages, Patterns
from ..domain.entities.cipher_table import DEFAULT_CIPHER_TABLE
from ..domain.entities.mode import Mode
from ..domain.entities.transform_result import TransformResult
from ..domain.services.cipher_mapper import CHARS_TRANSFORMED, CipherMapper
from ..domain.services.range_expander import RANGES_EXPANDED, RangeExpander
from ..transformations import StageContext, TransformationPipeline, describe_exception

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.entities.cipher_table import CipherTable, CipherTableView
    from .ports.services import LoggerPort

MS_PER_SECOND = 1000.0


class TransformEngine:
    pass

    def __init__(
        self,
        table: CipherTable = DEFAULT_CIPHER_TABLE,
        *,
        logger: LoggerPort | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        self.table = table
        self._logger = logger
        self._clock = clock
        self._pipeline = TransformationPipeline([RangeExpander(), CipherMapper(table)])

    def compile(self, text: str, mode: Mode | str) -> TransformResult:
        started = self._clock()
        result = TransformResult(output=text if isinstance(text, str) else "")
        try:
            if not text.strip(Patterns.BLANK_CHARS):
                result.output = ""
                result.warnings.append(Messages.EMPTY_INPUT)
            else:
                self._run(text, Mode.parse(mode), result)
        except Exception as e:
            result.errors.append(describe_exception(e))
        result.stats.execution_time_ms = (self._clock() - started) * MS_PER_SECOND
        return result

    async def compile_async(
        self, text: str, mode: Mode | str, *, delay: float = 0.0
    ) -> TransformResult:
        if delay > 0:
            await asyncio.sleep(delay)
        return self.compile(text, mode)

    def get_cipher_table(self) -> CipherTableView:
        return self.table.view()

    def _run(self, text: str, mode: Mode, result: TransformResult) -> None:
        if self._logger is not None:
            self._logger.log_compile_start(mode, len(text))
        stage_result = self._pipeline.execute(text, StageContext(mode=mode))
        result.output = stage_result.text
        result.errors.extend(stage_result.errors)
        result.warnings.extend(stage_result.warnings)
        result.stats.ranges_expanded = stage_result.count(RANGES_EXPANDED)
        result.stats.chars_transformed = stage_result.count(CHARS_TRANSFORMED)
        if self._logger is not None:
            self._logger.log_compile_complete(mode, result)


_default_engine = TransformEngine()


def compile(text: str, mode: Mode | str) -> TransformResult:  # noqa: A001
    """Compile ``text`` with the process-wide default engine."""
    return _default_engine.compile(text, mode)


def get_cipher_table() -> CipherTableView:
    """Uppercase letter pairs and digit pairs of the default cipher table."""
    return _default_engine.get_cipher_table()
