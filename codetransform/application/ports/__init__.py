"""Ports implemented by the infrastructure layer."""

from .services import CSVReaderPort, LoggerPort, ResultWriterPort

__all__ = ["CSVReaderPort", "LoggerPort", "ResultWriterPort"]
