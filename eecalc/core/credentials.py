"""
Weather API credential storage.

The key lives in the EECALC_API_KEY environment variable or, when that is
unset, in the project's .env file. `set_api_key` writes the .env entry with
python-dotenv so later runs pick it up through the settings loader.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import set_key

from .config import API_KEY_ENV_VAR, Settings, settings

logger = logging.getLogger(__name__)


def _resolve_env_file(env_file: Optional[Path]) -> Path:
    return Path(env_file) if env_file is not None else settings.env_file


def get_api_key(env_file: Optional[Path] = None) -> Optional[str]:
    """
    Return the configured API key, or None when no key is set.

    Args:
        env_file: .env file to read (defaults to settings.env_file)
    """
    path = _resolve_env_file(env_file)
    api_key = Settings(_env_file=path).api_key
    if api_key is None or not api_key.strip():
        return None
    return api_key.strip()


def set_api_key(api_key: str, env_file: Optional[Path] = None) -> Path:
    """
    Store the API key in the .env file and export it to this process.

    Args:
        api_key: Weather data API key
        env_file: .env file to write (defaults to settings.env_file)

    Returns:
        Path of the .env file written

    Raises:
        ValueError: If the key is empty
    """
    api_key = (api_key or "").strip()
    if not api_key:
        raise ValueError("API key must not be empty")

    path = _resolve_env_file(env_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(mode=0o600, exist_ok=True)

    set_key(str(path), API_KEY_ENV_VAR, api_key)
    os.environ[API_KEY_ENV_VAR] = api_key
    logger.info("Stored weather API key in %s", path)
    return path
