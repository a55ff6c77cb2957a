from .cipher_table import DEFAULT_CIPHER_TABLE, CipherTable, CipherTableView
from .mode import Mode
from .transform_result import TransformResult, TransformStats

__all__ = [
    "DEFAULT_CIPHER_TABLE",
    "CipherTable",
    "CipherTableView",
    "Mode",
    "TransformResult",
    "TransformStats",
]
