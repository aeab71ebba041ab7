"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * TrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the local storage file, pick the
    currency symbol used in summaries and reports, and choose the host and
    port of the control panel. Every field can be overridden with an
    ``EXPENSETRACKER_`` prefixed environment variable or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_CATEGORIES = [
    "General",
    "Food",
    "Transport",
    "Bills",
    "Entertainment",
    "Shopping",
    "Healthcare",
    "Education",
]


class TrackerSettings(BaseSettings):
    """Runtime configuration for the Expense Tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the local storage file.",
    )
    storage_filename: str = Field(
        "local_storage.json",
        description="Name of the JSON file that backs the key-value store.",
    )
    storage_key: str = Field(
        "transactions",
        description="Key under which the serialised transaction list is stored.",
    )
    currency_symbol: str = Field(
        "₦",
        description="Symbol prefixed to formatted amounts in summaries and reports.",
    )
    default_category: str = Field(
        "General",
        description="Category applied when a submission leaves the category blank.",
    )
    categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Categories offered by the dashboard form.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the control panel to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the control panel exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )

    class Config:
        env_prefix = "EXPENSETRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure the data directory expands user paths and exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Full path of the local storage file."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
