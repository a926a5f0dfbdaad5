import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CORRECT_THRESHOLD = 90
DEFAULT_CLOSE_THRESHOLD = 70
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Settings:
    correct_threshold: int = DEFAULT_CORRECT_THRESHOLD
    close_threshold: int = DEFAULT_CLOSE_THRESHOLD
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _log_level_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings() -> Settings:
    """
    Read practice settings from the environment.

    LINGOCARDS_CORRECT_THRESHOLD, LINGOCARDS_CLOSE_THRESHOLD and
    LINGOCARDS_LOG_LEVEL override the defaults (90, 70, INFO).
    """
    return Settings(
        correct_threshold=_int_env("LINGOCARDS_CORRECT_THRESHOLD", DEFAULT_CORRECT_THRESHOLD),
        close_threshold=_int_env("LINGOCARDS_CLOSE_THRESHOLD", DEFAULT_CLOSE_THRESHOLD),
        log_level=_log_level_env("LINGOCARDS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
