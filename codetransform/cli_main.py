"""CLI entry point for CodeTransform.

The command implementations live in the cli/ package; this module exposes the
click group for the console script and for ``python -m codetransform.cli_main``.
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
