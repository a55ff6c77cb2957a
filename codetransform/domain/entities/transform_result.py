"""Result value objects returned by a compile call.

A ``TransformResult`` is created fresh for every call and owned by the caller.
Diagnostics never escape as exceptions: malformed range tokens, empty input and
internal failures are all reported through ``errors`` and ``warnings``.

Example:
    >>> result = TransformResult(output="ABCDE", stats=TransformStats(ranges_expanded=1))
    >>> result.success
    True
    >>> result.to_dict()["stats"]["rangesExpanded"]
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class TransformStats:
    """Counters collected while compiling.

    Attributes:
        ranges_expanded: Number of range tokens expanded successfully (one per
            token, not per character produced)
        chars_transformed: Number of characters substituted by the cipher
        execution_time_ms: Duration of the compile call, from a monotonic clock
    """

    ranges_expanded: int = 0
    chars_transformed: int = 0
    execution_time_ms: float = 0.0

    def to_dict(self) -> dict[str, int | float]:
        return {
            "rangesExpanded": self.ranges_expanded,
            "charsTransformed": self.chars_transformed,
            "executionTimeMs": self.execution_time_ms,
        }


@dataclass(slots=True)
class TransformResult:
    """Outcome of compiling one input string.

    Attributes:
        output: Transformed text (empty for blank input)
        errors: One message per malformed range token, in input order
        warnings: Non-fatal notes, currently only the empty-input warning
        stats: Counters and timing for the call
    """

    output: str = ""
    errors: list[str] = field(default_factory=_empty_str_list)
    warnings: list[str] = field(default_factory=_empty_str_list)
    stats: TransformStats = field(default_factory=TransformStats)

    @property
    def success(self) -> bool:
        """Whether the call produced no errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "output": self.output,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "stats": self.stats.to_dict(),
        }

    def summary(self) -> str:
        """Generate a short human-readable summary.

        Example:
            >>> print(TransformResult(output="URYYB").summary())
            Compiled successfully: 0 range(s) expanded, 0 character(s) transformed
        """
        status = "successfully" if self.success else "with errors"
        lines = [
            f"Compiled {status}: {self.stats.ranges_expanded} range(s) expanded, "
            f"{self.stats.chars_transformed} character(s) transformed"
        ]
        if self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}): {', '.join(self.warnings)}")
        if self.errors:
            lines.append(f"Errors ({len(self.errors)}): {', '.join(self.errors)}")
        return "\n".join(lines)
