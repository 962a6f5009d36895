"""Settings for the commit-lint command line."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from commit_lint.core.errors import ConfigError

DEFAULT_CONFIG_FILE = ".commit-lint.json"


class Settings(BaseModel):
    """Options read from ``.commit-lint.json``."""

    repo_path: Path = Path(".")
    separator: str = "\n"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a JSON file.

    Without ``path`` the default file in the working directory is read, and its
    absence yields default settings. An explicit ``path`` must exist.
    """
    if path is None:
        config_file = Path(DEFAULT_CONFIG_FILE)
        if not config_file.exists():
            return Settings()
    else:
        config_file = Path(path)
        if not config_file.exists():
            raise ConfigError(f"Settings file {config_file} does not exist")

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Unable to read {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a JSON object")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_file}: {e}") from e
