from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
import string
from types import MappingProxyType

from ...constants import CipherPairs


@dataclass(frozen=True, slots=True)
class CipherTableView:
    letters: Mapping[str, str]
    digits: Mapping[str, str]

    def digit_row(self) -> list[tuple[str, str]]:
        return [(digit, self.digits.get(digit, digit)) for digit in string.digits]

    @property
    def fixed_digits(self) -> list[str]:
        return [digit for digit in string.digits if digit not in self.digits]


@dataclass(frozen=True, slots=True)
class CipherTable:
    pairs: Mapping[str, str]

    def __post_init__(self) -> None:
        for source, target in self.pairs.items():
            if len(source) != 1 or len(target) != 1:
                raise ValueError(
                    f"Cipher entries must map single characters, got {source!r} -> {target!r}"
                )
            if self.pairs.get(target) != source:
                raise ValueError(
                    f"Cipher table is not symmetric: {source!r} -> {target!r}"
                )
        object.__setattr__(self, "pairs", MappingProxyType(dict(self.pairs)))

    def __contains__(self, char: object) -> bool:
        return char in self.pairs

    def __iter__(self) -> Iterator[str]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def get(self, char: str) -> str | None:
        return self.pairs.get(char)

    def view(self) -> CipherTableView:
        letters = {
            key: value
            for key, value in sorted(self.pairs.items())
            if key in string.ascii_uppercase
        }
        digits = {
            key: value
            for key, value in sorted(self.pairs.items())
            if key in string.digits
        }
        return CipherTableView(
            letters=MappingProxyType(letters), digits=MappingProxyType(digits)
        )

    @classmethod
    def build_default(cls) -> CipherTable:
        pairs: dict[str, str] = {}
        for alphabet in (string.ascii_uppercase, string.ascii_lowercase):
            rotated = (
                alphabet[CipherPairs.LETTER_ROTATION :]
                + alphabet[: CipherPairs.LETTER_ROTATION]
            )
            pairs.update(zip(alphabet, rotated, strict=True))
        for left, right in CipherPairs.DIGIT_PAIRS:
            pairs[left] = right
            pairs[right] = left
        return cls(pairs=pairs)


DEFAULT_CIPHER_TABLE = CipherTable.build_default()
