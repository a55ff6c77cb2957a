"""Base interface for text transformation stages.

This module defines the structural interface that every stage of the compile
pipeline implements, together with the context and result objects passed
between stages.

Example:
    Implementing a simple stage:

    >>> from codetransform.transformations.base import StageContext, StageResult
    >>> from codetransform.domain.entities.mode import Mode
    >>>
    >>> class UppercaseStage:
    ...     def can_transform(self, mode: Mode) -> bool:
    ...         return mode is Mode.DEFAULT
    ...
    ...     def transform(self, text: str, context: StageContext) -> StageResult:
    ...         return StageResult(text=text.upper())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.entities.mode import Mode


def _empty_str_list() -> list[str]:
    return []


def _empty_counters() -> dict[str, int]:
    return {}


@dataclass(frozen=True, slots=True)
class StageContext:
    """Context passed to every stage of a compile call.

    Attributes:
        mode: Mode selected by the caller
    """

    mode: Mode


@dataclass(slots=True)
class StageResult:
    """Result of running one stage.

    Attributes:
        text: Text produced by the stage
        warnings: Non-fatal notes
        errors: Diagnostics for malformed input; the text is still usable
        counters: Named counts (e.g. ``ranges_expanded``) summed by the pipeline
    """

    text: str
    warnings: list[str] = field(default_factory=_empty_str_list)
    errors: list[str] = field(default_factory=_empty_str_list)
    counters: dict[str, int] = field(default_factory=_empty_counters)

    def count(self, name: str) -> int:
        return self.counters.get(name, 0)


class TransformerPort(Protocol):
    """Protocol implemented by pipeline stages.

    Stages must not raise for malformed input; such problems are reported in
    ``StageResult.errors`` and the stage still returns usable text.
    """

    def can_transform(self, mode: Mode) -> bool:
        """Whether this stage runs for the given mode."""
        ...

    def transform(self, text: str, context: StageContext) -> StageResult:
        """Transform ``text`` and report diagnostics."""
        ...
