"""Compile modes.

A mode selects which combination of range expansion and cipher mapping a
compile call performs. The set is closed: callers cannot register new modes.
"""

from __future__ import annotations

from enum import StrEnum


class Mode(StrEnum):
    DEFAULT = "default"
    RANGE = "range"
    MAPPING = "mapping"
    COMBINED = "combined"

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def description(self) -> str:
        return _LABELS[self][1]

    @property
    def expands_ranges(self) -> bool:
        return self in (Mode.RANGE, Mode.COMBINED)

    @property
    def applies_cipher(self) -> bool:
        return self in (Mode.MAPPING, Mode.COMBINED)

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Resolve a mode from an enum member or its case-insensitive name.

        Raises:
            ValueError: If ``value`` names no known mode.
        """
        if isinstance(value, Mode):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for mode in cls:
                if mode.value == normalized:
                    return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown mode {value!r} (expected one of: {choices})")

    @classmethod
    def choices(cls) -> list[str]:
        return [mode.value for mode in cls]


_LABELS: dict[Mode, tuple[str, str]] = {
    Mode.DEFAULT: ("Default", "No transformation"),
    Mode.RANGE: ("Range Expansion", "Expand A->Z patterns"),
    Mode.MAPPING: ("Cipher Mapping", "Apply substitution cipher"),
    Mode.COMBINED: ("Combined", "Range + Cipher"),
}
