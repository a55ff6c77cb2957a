"""Unit tests for logger implementations.

Tests verify that:
1. ConsoleLogger and NullLogger implement LoggerPort
2. ConsoleLogger honours verbosity and reports compile statistics
3. NullLogger stays silent
"""

from io import StringIO
from pathlib import Path
import unittest

from rich.console import Console

from codetransform.application.ports.services import LoggerPort
from codetransform.application.transform_engine import TransformEngine
from codetransform.domain.entities.mode import Mode
from codetransform.domain.entities.transform_result import (
    TransformResult,
    TransformStats,
)
from codetransform.infrastructure.logging import ConsoleLogger, LogLevel, NullLogger


def _result(ranges: int = 0, chars: int = 0, errors=None) -> TransformResult:
    return TransformResult(
        output="",
        errors=list(errors or []),
        stats=TransformStats(ranges_expanded=ranges, chars_transformed=chars),
    )


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        self.assertIsInstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_implements_loggerport(self):
        self.assertIsInstance(NullLogger(), LoggerPort)

    def test_loggerport_has_compile_hooks(self):
        required_methods = {
            "log_compile_start",
            "log_compile_complete",
            "log_batch_start",
            "log_batch_row",
            "log_final_stats",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger output and statistics."""

    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=False, width=120)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)

    def test_markup_is_escaped(self):
        self.logger.verbose("[bold]not markup[/bold]")
        self.assertIn("[bold]not markup[/bold]", self.buffer.getvalue())

    def test_verbose_hidden_at_normal_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.verbose("Hidden")
        logger.debug("Also hidden")
        self.assertEqual(self.buffer.getvalue(), "")

    def test_verbose_shown_at_verbose_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.VERBOSE)
        logger.verbose("Shown")
        logger.debug("Hidden")
        output = self.buffer.getvalue()
        self.assertIn("Shown", output)
        self.assertNotIn("Hidden", output)

    def test_compile_hooks(self):
        self.logger.log_compile_start(Mode.COMBINED, 4)
        self.logger.log_compile_complete(Mode.COMBINED, _result(ranges=1, chars=5))

        output = self.buffer.getvalue()
        self.assertIn("Compiling 4 characters in Combined mode", output)
        self.assertIn("1 range(s) expanded, 5 character(s) transformed", output)

    def test_context_prefix_at_debug_level(self):
        self.logger.log_compile_start(Mode.RANGE, 10)
        self.assertIn("[range] Compiling 10 characters", self.buffer.getvalue())

    def test_context_prefix_includes_batch_source(self):
        self.logger.log_batch_start(Path("codes.csv"), 1)
        self.logger.log_compile_start(Mode.RANGE, 10)
        self.assertIn("[codes.csv:range] Compiling", self.buffer.getvalue())

    def test_no_prefix_below_debug_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.VERBOSE)
        logger.log_compile_start(Mode.RANGE, 10)
        self.assertNotIn("[range]", self.buffer.getvalue())

    def test_batch_start(self):
        self.logger.log_batch_start(Path("data/codes.csv"), 1200)
        self.assertIn("Compiling 1,200 rows from codes.csv", self.buffer.getvalue())

    def test_batch_row_reports_errors(self):
        self.logger.log_batch_row(3, _result(errors=["Invalid range: bad"]))
        output = self.buffer.getvalue()
        self.assertIn("Row 3: 1 error(s)", output)
        self.assertIn("Invalid range: bad", output)

    def test_final_stats_totals(self):
        self.logger.log_compile_complete(Mode.RANGE, _result(ranges=2))
        self.logger.log_compile_complete(Mode.MAPPING, _result(chars=3))
        self.logger.log_final_stats()
        output = self.buffer.getvalue()
        self.assertIn("Compile Statistics:", output)
        self.assertIn("Compilations: 2", output)
        self.assertIn("Ranges expanded: 2", output)
        self.assertIn("Characters transformed: 3", output)
        self.assertNotIn("Errors:", output)
        self.assertNotIn("Warnings:", output)

    def test_final_stats_count_compile_errors(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.VERBOSE)
        engine = TransformEngine(logger=logger)

        engine.compile("A->z 5->A", "range")
        engine.compile("B->D", "range")
        logger.log_final_stats()

        output = self.buffer.getvalue()
        self.assertIn("Compilations: 2", output)
        self.assertIn("Errors: 2", output)

    def test_final_stats_count_result_warnings(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.VERBOSE)
        result = _result()
        result.warnings.append("Input is empty")

        logger.log_compile_complete(Mode.DEFAULT, result)
        logger.log_final_stats()

        self.assertIn("Warnings: 1", self.buffer.getvalue())

    def test_final_stats_hidden_at_normal_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.log_compile_complete(Mode.RANGE, _result(errors=["bad"]))
        logger.log_final_stats()
        self.assertEqual(self.buffer.getvalue(), "")


class TestNullLogger(unittest.TestCase):
    """NullLogger should accept every hook and print nothing."""

    def test_all_hooks_are_silent(self):
        logger = NullLogger()
        logger.log_compile_start(Mode.RANGE, 1)
        logger.log_compile_complete(Mode.RANGE, _result())
        logger.log_batch_start(Path("codes.csv"), 1)
        logger.log_batch_row(1, _result())
        self.assertIsNone(logger.log_final_stats())
