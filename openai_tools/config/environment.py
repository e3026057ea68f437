"""
Environment loading for credentials and endpoint overrides.

Credentials are read from process environment variables. A ``.env`` file in
the working directory is loaded first when it exists, so local development
does not need exported variables.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import dotenv

from openai_tools.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file if it exists.

    Existing process variables are never overridden.

    Returns:
        bool: True if a file was found and loaded
    """
    env_path = env_path or Path(".") / ".env"
    if env_path.exists():
        logger.debug(f"Loading environment from {env_path}")
        return dotenv.load_dotenv(env_path)
    return False


def get_env(name: str) -> Optional[str]:
    """Return a non-empty environment variable or None."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value
