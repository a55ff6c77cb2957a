"""Character classification used by range validation.

Only ASCII letters and digits are valid range endpoints; every other
character, including non-ASCII letters, classifies as ``OTHER``.
"""

from enum import Enum
import string

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_UPPER = frozenset(string.ascii_uppercase)


class CharClass(Enum):
    LETTER = "letter"
    DIGIT = "digit"
    OTHER = "other"


def is_letter(char: str) -> bool:
    return char in _LETTERS


def is_digit(char: str) -> bool:
    return char in _DIGITS


def is_upper(char: str) -> bool:
    return char in _UPPER


def classify(char: str) -> CharClass:
    if is_letter(char):
        return CharClass.LETTER
    if is_digit(char):
        return CharClass.DIGIT
    return CharClass.OTHER
