"""Range expansion of ``X->Y`` tokens.

A range token is any character, the arrow ``->`` and any character, e.g.
``A->E`` or ``9->1``. Tokens are found by a single left-to-right scan; a
character consumed by one token is never reused by another, so ``A->B->C``
expands to ``AB->C``. Endpoints never include a line terminator.

Example:
    >>> RangeExpander().expand("A->E and 3->1").text
    'ABCDE and 321'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...constants import Messages, Patterns
from ...transformations.base import StageResult, TransformerPort
from .char_classes import CharClass, classify, is_upper

if TYPE_CHECKING:
    from ...transformations.base import StageContext
    from ..entities.mode import Mode

RANGES_EXPANDED = "ranges_expanded"
TOKEN_LENGTH = 4


class InvalidRangeError(ValueError):
    """Raised by ``expand_range`` for a malformed range token."""

    def __init__(self, message: str, start: str, end: str) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


def validate_range(start: str, end: str) -> str | None:
    """Return the error message for a range, or None when it is valid."""
    start_class = classify(start)
    end_class = classify(end)
    if start_class is CharClass.LETTER and end_class is not CharClass.LETTER:
        return Messages.MIXED_LETTER.format(start=start, end=end)
    if start_class is CharClass.DIGIT and end_class is not CharClass.DIGIT:
        return Messages.MIXED_DIGIT.format(start=start, end=end)
    if start_class is CharClass.OTHER:
        return Messages.INVALID_START.format(start=start)
    if start_class is CharClass.LETTER and is_upper(start) != is_upper(end):
        return Messages.CASE_MISMATCH.format(start=start, end=end)
    return None


def expand_range(start: str, end: str) -> str:
    """Expand one range into its inclusive run of characters.

    The run steps by code point from ``start`` to ``end``, descending when
    ``start`` sorts after ``end``.

    Raises:
        InvalidRangeError: If the endpoints do not form a valid range.

    Example:
        >>> expand_range("Z", "V")
        'ZYXWV'
    """
    error = validate_range(start, end)
    if error is not None:
        raise InvalidRangeError(error, start, end)
    start_code = ord(start)
    end_code = ord(end)
    step = 1 if start_code <= end_code else -1
    return "".join(chr(code) for code in range(start_code, end_code + step, step))


def _is_endpoint(char: str) -> bool:
    return char not in Patterns.LINE_TERMINATORS


class RangeExpander(TransformerPort):
    pass

    @override
    def can_transform(self, mode: Mode) -> bool:
        return mode.expands_ranges

    @override
    def transform(self, text: str, context: StageContext) -> StageResult:
        return self.expand(text)

    def expand(self, text: str) -> StageResult:
        pieces: list[str] = []
        errors: list[str] = []
        expanded = 0
        index = 0
        length = len(text)
        while index < length:
            if self._token_at(text, index):
                start = text[index]
                end = text[index + TOKEN_LENGTH - 1]
                try:
                    pieces.append(expand_range(start, end))
                    expanded += 1
                except InvalidRangeError as e:
                    errors.append(str(e))
                    pieces.append(text[index : index + TOKEN_LENGTH])
                index += TOKEN_LENGTH
            else:
                pieces.append(text[index])
                index += 1
        return StageResult(
            text="".join(pieces),
            errors=errors,
            counters={RANGES_EXPANDED: expanded},
        )

    @staticmethod
    def _token_at(text: str, index: int) -> bool:
        if index + TOKEN_LENGTH > len(text):
            return False
        arrow = text[index + 1 : index + TOKEN_LENGTH - 1]
        return (
            arrow == Patterns.RANGE_ARROW
            and _is_endpoint(text[index])
            and _is_endpoint(text[index + TOKEN_LENGTH - 1])
        )
