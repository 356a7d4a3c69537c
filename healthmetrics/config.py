"""Configuration utilities for the metrics engine."""

import os
from pathlib import Path
from typing import Optional, Union

import structlog
from dotenv import load_dotenv

logger = structlog.get_logger(__name__)

DEFAULT_MATCH_THRESHOLD = 0.7
DEFAULT_NAME_SIMILARITY_THRESHOLD = 0.8
DEFAULT_GRAVITY = 9.81
DEFAULT_LOG_LEVEL = "INFO"


def load_environment(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load environment variables from a .env file.

    Values already present in the process environment win over the file.

    Args:
        env_file: Path to the .env file, defaults to ./.env

    Returns:
        True if a file was found and loaded
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid numeric setting, using default", setting=name, value=raw, default=default)
        return default


def get_match_threshold() -> float:
    """
    Get default similarity threshold for catalog matching.

    Returns:
        Value of HEALTHMETRICS_MATCH_THRESHOLD, defaults to 0.7
    """
    return _get_float("HEALTHMETRICS_MATCH_THRESHOLD", DEFAULT_MATCH_THRESHOLD)


def get_name_similarity_threshold() -> float:
    """
    Get threshold for the quick "same food name" check.

    Returns:
        Value of HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD, defaults to 0.8
    """
    return _get_float(
        "HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD", DEFAULT_NAME_SIMILARITY_THRESHOLD
    )


def get_gravity() -> float:
    """
    Get gravitational acceleration used by the work/power calculator.

    Returns:
        Value of HEALTHMETRICS_GRAVITY in m/s², defaults to 9.81
    """
    return _get_float("HEALTHMETRICS_GRAVITY", DEFAULT_GRAVITY)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased HEALTHMETRICS_LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("HEALTHMETRICS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
