"""
Settings loading helpers.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Runtime settings read from environment variables.

    Attributes:
        git_executable: Command used to look up the author name.
        log_level: Logging level overriding the ``--log-level`` option.
    """
    git_executable: str = Field(default="git", alias="GO_INIT_GIT")
    log_level: Optional[str] = Field(default=None, alias="GO_INIT_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.

    Unset variables fall back to the model defaults.
    """
    values = {
        field.alias: os.environ[field.alias]
        for field in Settings.model_fields.values()
        if field.alias in os.environ
    }
    return Settings(**values)
