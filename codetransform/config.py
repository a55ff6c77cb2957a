from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults
from .domain.entities.mode import Mode


@dataclass(frozen=True, slots=True)
class TransformConfig:
    default_mode: str = Defaults.MODE
    verbosity: int = Defaults.VERBOSITY
    input_column: str = Defaults.INPUT_COLUMN
    mode_column: str = Defaults.MODE_COLUMN
    encoding: str = Defaults.ENCODING
    simulated_delay: float = Defaults.SIMULATED_DELAY

    def __post_init__(self) -> None:
        try:
            Mode.parse(self.default_mode)
        except ValueError as e:
            raise ValueError(f"default_mode is invalid: {e}") from e
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be non-negative, got {self.verbosity}")
        if not self.input_column.strip():
            raise ValueError("input_column must not be empty")
        if not self.mode_column.strip():
            raise ValueError("mode_column must not be empty")
        if self.simulated_delay < 0:
            raise ValueError(
                f"simulated_delay must be non-negative, got {self.simulated_delay}"
            )

    @property
    def mode(self) -> Mode:
        return Mode.parse(self.default_mode)

    @classmethod
    def from_env(cls) -> TransformConfig:
        return cls(
            default_mode=os.getenv("CODETRANSFORM_DEFAULT_MODE", Defaults.MODE),
            verbosity=int(
                os.getenv("CODETRANSFORM_VERBOSITY", str(Defaults.VERBOSITY))
            ),
            input_column=os.getenv(
                "CODETRANSFORM_INPUT_COLUMN", Defaults.INPUT_COLUMN
            ),
            mode_column=os.getenv("CODETRANSFORM_MODE_COLUMN", Defaults.MODE_COLUMN),
            encoding=os.getenv("CODETRANSFORM_ENCODING", Defaults.ENCODING),
            simulated_delay=float(
                os.getenv(
                    "CODETRANSFORM_SIMULATED_DELAY", str(Defaults.SIMULATED_DELAY)
                )
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TransformConfig:
        config = TransformConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TransformConfig
    ) -> TransformConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        default_section = _get_table(data, "default")
        batch_section = _get_table(data, "batch")
        default_mode = base_config.default_mode
        if (value := default_section.get("mode")) is not None:
            default_mode = str(value)
        verbosity = base_config.verbosity
        if (value := default_section.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="default.verbosity")
        simulated_delay = base_config.simulated_delay
        if (value := default_section.get("simulated_delay")) is not None:
            simulated_delay = _coerce_float(value, key="default.simulated_delay")
        input_column = base_config.input_column
        if value := batch_section.get("input_column"):
            input_column = str(value)
        mode_column = base_config.mode_column
        if value := batch_section.get("mode_column"):
            mode_column = str(value)
        encoding = base_config.encoding
        if value := batch_section.get("encoding"):
            encoding = str(value)
        return TransformConfig(
            default_mode=default_mode,
            verbosity=verbosity,
            input_column=input_column,
            mode_column=mode_column,
            encoding=encoding,
            simulated_delay=simulated_delay,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
