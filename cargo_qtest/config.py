"""Runtime configuration read from the environment."""

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

CARGO_ENV = "CARGO"
LOG_LEVEL_ENV = "CARGO_QTEST_LOG"


class QtestConfig(BaseModel):
    """Configuration for a qtest run."""

    model_config = ConfigDict(frozen=True)

    # Cargo sets CARGO for subcommands, pointing at the active toolchain
    cargo_bin: str = Field(default="cargo", min_length=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_config(environ: Mapping[str, str]) -> QtestConfig:
    """Build the configuration from environment variables.

    Unset variables fall back to the model defaults.
    """
    values: dict[str, str] = {}
    if cargo_bin := environ.get(CARGO_ENV):
        values["cargo_bin"] = cargo_bin
    if log_level := environ.get(LOG_LEVEL_ENV):
        values["log_level"] = log_level
    return QtestConfig(**values)
