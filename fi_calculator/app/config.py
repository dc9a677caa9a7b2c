from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    """
    Read settings from the environment, after loading a local .env if present.

    FI_ENV, FI_LOG_LEVEL and FI_CORS_ORIGINS (comma-separated) are recognised.
    """
    load_dotenv()

    raw_origins = os.getenv("FI_CORS_ORIGINS")
    origins = _split_origins(raw_origins) if raw_origins else DEFAULT_CORS_ORIGINS

    return Settings(
        env=os.getenv("FI_ENV", "dev"),
        log_level=os.getenv("FI_LOG_LEVEL", "INFO"),
        cors_origins=origins,
    )
