"""Application configuration: settings schema, config.yaml loader and logging setup"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    log_level:            str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                       description="Level applied to the docstore logger")
    reject_duplicate_ids: bool = Field(default=False, description="Reject upserts whose id is already stored")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the store settings mapping in path, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of store settings, got {type(data).__name__}")
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build store Settings; later sources win.

    Sources: config.yaml in the working directory, DOCSTORE_LOG_LEVEL /
    DOCSTORE_REJECT_DUPLICATE_IDS env vars, then non-None overrides.
    """
    data = _read_config_file(Path(CONFIG_FILE))
    env = {name: os.environ[ENV_PREFIX + name.upper()] for name in Settings.model_fields
           if os.environ.get(ENV_PREFIX + name.upper())}
    data.update(env)
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level from settings."""
    logger = logging.getLogger("docstore")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
