from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...transformations.base import StageResult, TransformerPort
from ..entities.cipher_table import DEFAULT_CIPHER_TABLE, CipherTable

if TYPE_CHECKING:
    from ...transformations.base import StageContext
    from ..entities.mode import Mode

CHARS_TRANSFORMED = "chars_transformed"


class CipherMapper(TransformerPort):
    pass

    def __init__(self, table: CipherTable = DEFAULT_CIPHER_TABLE) -> None:
        super().__init__()
        self.table = table

    @override
    def can_transform(self, mode: Mode) -> bool:
        return mode.applies_cipher

    @override
    def transform(self, text: str, context: StageContext) -> StageResult:
        return self.apply(text)

    def apply(self, text: str) -> StageResult:
        pieces: list[str] = []
        transformed = 0
        for char in text:
            mapped = self.table.get(char)
            if mapped is None:
                pieces.append(char)
            else:
                pieces.append(mapped)
                transformed += 1
        return StageResult(
            text="".join(pieces),
            counters={CHARS_TRANSFORMED: transformed},
        )
