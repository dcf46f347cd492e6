"""
Runtime configuration for the solution viewer
Values are read from the environment (loaded from .env via dotenv)
"""
import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_UPSTREAM_BASE_URL = "https://oahelper.in/solution-requests.php"
DEFAULT_IDENTITY_FILE = "user_ids.txt"
DEFAULT_MAX_RETRIES = 3
DEFAULT_UPSTREAM_TIMEOUT = 15.0
DEFAULT_HIGHLIGHT_LANGUAGE = "cpp"
DEFAULT_HIGHLIGHT_STYLE = "monokai"


@dataclass(frozen=True)
class Settings:
    """Settings snapshot for a single request"""
    upstream_base_url: str = DEFAULT_UPSTREAM_BASE_URL
    identity_file: str = DEFAULT_IDENTITY_FILE
    max_retries: int = DEFAULT_MAX_RETRIES
    upstream_timeout: float = DEFAULT_UPSTREAM_TIMEOUT
    highlight_language: str = DEFAULT_HIGHLIGHT_LANGUAGE
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"[CONFIG] {name}={raw!r} is not an integer, using {default}")
        return default
    if value < minimum:
        logger.warning(f"[CONFIG] {name}={value} is below {minimum}, using {default}")
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"[CONFIG] {name}={raw!r} is not a number, using {default}")
        return default
    if value <= 0:
        logger.warning(f"[CONFIG] {name}={value} must be positive, using {default}")
        return default
    return value


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Called per request so edits to the environment (or dependency overrides
    in tests) take effect without a restart.
    """
    return Settings(
        upstream_base_url=os.getenv("UPSTREAM_BASE_URL") or DEFAULT_UPSTREAM_BASE_URL,
        identity_file=os.getenv("IDENTITY_FILE") or DEFAULT_IDENTITY_FILE,
        max_retries=_env_int("MAX_RETRIES", DEFAULT_MAX_RETRIES, minimum=1),
        upstream_timeout=_env_float("UPSTREAM_TIMEOUT", DEFAULT_UPSTREAM_TIMEOUT),
        highlight_language=os.getenv("HIGHLIGHT_LANGUAGE") or DEFAULT_HIGHLIGHT_LANGUAGE,
        highlight_style=os.getenv("HIGHLIGHT_STYLE") or DEFAULT_HIGHLIGHT_STYLE,
    )
