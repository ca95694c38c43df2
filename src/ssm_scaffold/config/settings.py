"""
Runtime settings loaded from the environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
DEFAULT_LOG_LEVEL = "warning"


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


class ScaffoldSettings(BaseModel):
    """
    Settings read from environment variables.

    Attributes:
        log_level: Logging level name overriding the command line choice.
    """
    log_level: Optional[str] = Field(default=None, alias="SSM_SCAFFOLD_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> ScaffoldSettings:
    """
    Load settings from environment/.env exactly once.
    """
    _load_dotenv()
    values = {field.alias: os.getenv(field.alias) for field in ScaffoldSettings.model_fields.values()}
    return ScaffoldSettings(**values)


def resolve_log_level(requested: Optional[str], settings: Optional[ScaffoldSettings] = None) -> str:
    """
    Pick the effective log level name (upper-case) from the environment or the request.

    Unknown names fall back to the default level.
    """
    settings = settings or get_settings()
    level_str = (settings.log_level or requested or DEFAULT_LOG_LEVEL).lower()
    if level_str not in LOG_LEVELS:
        level_str = DEFAULT_LOG_LEVEL
    return level_str.upper()
