from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

from .errors import MissingApiKeyError

DEFAULT_BASE_URL = "https://your-service.microcms.io"
DOTENV_FILES = (".env.local", ".env")


@dataclass(frozen=True)
class MicroCMSConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load microCMS API key and base URL from environment (optional .env files)."""
    if use_dotenv:
        # Earlier files win: load_dotenv never overrides variables already set.
        for path in DOTENV_FILES:
            load_dotenv(path)
    api_key = os.getenv("MICROCMS_API_KEY", "").strip()
    base_url = os.getenv("MICROCMS_BASE_URL", "").strip() or DEFAULT_BASE_URL
    return api_key, base_url


def load_config(*, use_dotenv: bool = True) -> MicroCMSConfig:
    """Build the process-wide config; a missing API key is fatal."""
    api_key, base_url = load_env_config(use_dotenv=use_dotenv)
    if not api_key:
        raise MissingApiKeyError("MICROCMS_API_KEY is not set")
    return MicroCMSConfig(api_key=api_key, base_url=base_url.rstrip("/"))


def log_level_from_env() -> str:
    return os.getenv("MICROCMS_LOG_LEVEL", "").strip() or "INFO"


__all__ = [
    "DEFAULT_BASE_URL",
    "MicroCMSConfig",
    "load_env_config",
    "load_config",
    "log_level_from_env",
]
