import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from exceptions import ConfigurationError

load_dotenv()

ENVIRONMENTS = ("development", "production", "testing")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    match_workers: int = 4


def _read_int(key, default, minimum=1):
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer", config_key=key, config_value=raw, cause=e)
    if value < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}", config_key=key, config_value=raw)
    return value


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file if present)."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    if environment not in ENVIRONMENTS:
        raise ConfigurationError(
            f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}",
            config_key="ENVIRONMENT", config_value=environment
        )

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}",
            config_key="LOG_LEVEL", config_value=log_level
        )

    return Settings(
        environment=environment,
        log_level=log_level,
        log_to_file=os.getenv("LOG_TO_FILE", "false").lower() in TRUE_VALUES,
        log_dir=os.getenv("LOG_DIR", "logs"),
        match_workers=_read_int("MATCH_WORKERS", 4),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
