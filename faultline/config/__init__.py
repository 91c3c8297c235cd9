"""Configuration package."""

from __future__ import annotations

import os
from functools import lru_cache

from faultline.core.utils.constants import DEFAULT_FAILURE_RATE

__all__: list[str] = ["Settings", "get_settings"]


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


class Settings:  # noqa: D101
    def __init__(self) -> None:
        self.app_env: str = os.getenv("FAULTLINE_ENV", "development")
        self.failure_rate: float = _env_float("FAULTLINE_FAILURE_RATE", DEFAULT_FAILURE_RATE)
        if not 0.0 <= self.failure_rate <= 1.0:
            raise ValueError(
                f"FAULTLINE_FAILURE_RATE must be between 0.0 and 1.0, got {self.failure_rate}"
            )
        self.log_level: str = os.getenv("FAULTLINE_LOG_LEVEL", "WARNING").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return cached Settings instance."""

    return Settings()
