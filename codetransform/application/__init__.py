"""Application layer.

This package holds the compile engine and the batch use case, plus the ports
the infrastructure layer implements.
"""

from .batch_compile_use_case import (
    BatchCompileDependencies,
    BatchCompileUseCase,
    MissingColumnError,
)
from .models import BatchCompileRequest, BatchCompileResponse, BatchRowResult
from .transform_engine import TransformEngine, compile, get_cipher_table

__all__ = [
    "BatchCompileDependencies",
    "BatchCompileRequest",
    "BatchCompileResponse",
    "BatchCompileUseCase",
    "BatchRowResult",
    "MissingColumnError",
    "TransformEngine",
    "compile",
    "get_cipher_table",
]
