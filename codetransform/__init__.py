"""CodeTransform package.

This package provides a small deterministic text-transformation engine that
simulates compiler-like behaviour with two rules:

- Range expansion of ``X->Y`` tokens (``A->E`` becomes ``ABCDE``)
- A fixed substitution cipher (ROT13 for letters, paired digit swaps)

The four compile modes combine these rules: ``default``, ``range``,
``mapping`` and ``combined``.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("codetransform")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from codetransform.application.transform_engine import (
    TransformEngine,
    compile,
    get_cipher_table,
)
from codetransform.domain.entities.cipher_table import (
    DEFAULT_CIPHER_TABLE,
    CipherTable,
    CipherTableView,
)
from codetransform.domain.entities.mode import Mode
from codetransform.domain.entities.transform_result import (
    TransformResult,
    TransformStats,
)

__all__ = [
    "__version__",
    # Engine
    "TransformEngine",
    "compile",
    "get_cipher_table",
    # Model
    "Mode",
    "TransformResult",
    "TransformStats",
    # Cipher
    "DEFAULT_CIPHER_TABLE",
    "CipherTable",
    "CipherTableView",
]
