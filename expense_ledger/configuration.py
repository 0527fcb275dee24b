"""Mini README: Runtime configuration for the expense ledger.

Structure:
    * LedgerSettings - pydantic settings model read from the environment.
    * get_settings - cached accessor used by ``Ledger.from_settings``.

Usage:
    Set ``EXPENSE_LEDGER_DATA_FILE`` (or put it in ``.env``) to point the
    ledger at a different backing file. The core classes take explicit
    arguments and never consult these settings on their own.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LedgerSettings(BaseSettings):
    """Where the ledger keeps its records and how it treats them."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: Path = Field(
        Path("expenses.txt"),
        description="Flat text file holding one expense per line.",
    )
    encoding: str = Field(
        "utf-8",
        description="Text encoding used when reading and rewriting the data file.",
    )
    skip_malformed_lines: bool = Field(
        False,
        description=(
            "Log and skip lines that fail to decode instead of failing the load."
            " Leave disabled to surface corrupt history to the caller."
        ),
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by embedding applications.",
    )

    @field_validator("data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand ``~`` and make sure the containing directory exists."""

        path = Path(value).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        normalised = value.strip().upper()
        if normalised not in _LEVEL_NAMES:
            raise ValueError(f"Unknown logging level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
