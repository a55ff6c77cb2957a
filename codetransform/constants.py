from typing import ClassVar


class Defaults:
    MODE = "combined"
    VERBOSITY = 0
    INPUT_COLUMN = "input"
    MODE_COLUMN = "mode"
    ENCODING = "utf-8"
    SIMULATED_DELAY = 0.0
    CONFIG_FILE = "codetransform.toml"
    RESULTS_SUFFIX = "_results"
    EXAMPLE_INPUT = (
        "// Try these examples:\n"
        "Hello World\n"
        "A->Z\n"
        "1->9\n"
        "HELLO (becomes URYYB in mapping mode)\n"
        "A->E combined with mapping"
    )


class Messages:
    EMPTY_INPUT = "Input is empty"
    UNEXPECTED_ERROR = "Unexpected error: {message}"
    MIXED_LETTER = "Invalid range: Cannot mix letter '{start}' with non-letter '{end}'"
    MIXED_DIGIT = "Invalid range: Cannot mix digit '{start}' with non-digit '{end}'"
    INVALID_START = "Invalid range: '{start}' is not a valid range character"
    CASE_MISMATCH = "Invalid range: Case mismatch between '{start}' and '{end}'"


class Patterns:
    RANGE_ARROW = "->"
    # Characters a single-character wildcard never matches.
    LINE_TERMINATORS: ClassVar[frozenset[str]] = frozenset(
        {"\n", "\r", "\u2028", "\u2029"}
    )
    RANGE_EXAMPLES: ClassVar[tuple[str, ...]] = ("A->E", "Z->V", "1->5")
    # Characters removed when deciding whether input is blank; unlike
    # str.strip() this includes U+FEFF and excludes \x1c-\x1f and U+0085.
    BLANK_CHARS = (
        "\t\n\v\f\r "
        "\u00a0\u1680"
        "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
        "\u2028\u2029\u202f\u205f\u3000\ufeff"
    )


class CipherPairs:
    LETTER_ROTATION = 13
    DIGIT_PAIRS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("1", "5"),
        ("2", "4"),
        ("3", "9"),
        ("6", "8"),
    )
