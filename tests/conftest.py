from io import StringIO
import os

import pytest
from rich.console import Console

from codetransform.application.transform_engine import TransformEngine


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests independent of the developer's environment.

    ConfigLoader reads CODETRANSFORM_* variables and ./codetransform.toml, so
    each test runs with those variables cleared and inside an empty directory.
    """
    for name in list(os.environ):
        if name.startswith("CODETRANSFORM_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def engine() -> TransformEngine:
    return TransformEngine()


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def console(buffer: StringIO) -> Console:
    return Console(file=buffer, force_terminal=False, width=120)
