"""Pipeline for chaining text transformation stages.

Stages run in registration order. Each applicable stage receives the text
produced by the previous one. Stage errors are diagnostics only: the stage's
text is still carried forward. An exception raised by a stage stops the
pipeline, keeping the text and counters produced so far.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import Messages
from .base import StageContext, StageResult, TransformerPort

if TYPE_CHECKING:
    from collections.abc import Iterable


def describe_exception(exc: BaseException) -> str:
    """Render an exception for the ``Unexpected error`` diagnostic."""
    message = str(exc) or type(exc).__name__
    return Messages.UNEXPECTED_ERROR.format(message=message)


class TransformationPipeline:
    """Pipeline for composing and executing stages in sequence.

    Example:
        >>> from codetransform.domain.services import CipherMapper, RangeExpander
        >>> from codetransform.domain.entities.mode import Mode
        >>>
        >>> pipeline = TransformationPipeline([RangeExpander(), CipherMapper()])
        >>> result = pipeline.execute("A->E", StageContext(mode=Mode.COMBINED))
        >>> result.text
        'NOPQR'
    """

    def __init__(self, transformers: Iterable[TransformerPort]):
        self.transformers: tuple[TransformerPort, ...] = tuple(transformers)

    def execute(self, text: str, context: StageContext) -> StageResult:
        """Run every applicable stage over ``text``.

        Returns:
            StageResult with the final text, all stage diagnostics in order
            and the summed counters
        """
        result = StageResult(text=text)

        for transformer in self.transformers:
            if not transformer.can_transform(context.mode):
                continue

            try:
                stage_result = transformer.transform(result.text, context)
            except Exception as e:
                result.errors.append(describe_exception(e))
                return result

            result.text = stage_result.text
            result.warnings.extend(stage_result.warnings)
            result.errors.extend(stage_result.errors)
            for name, value in stage_result.counters.items():
                result.counters[name] = result.count(name) + value

        return result
