"""
Logging configuration for Resume Insight
"""
import logging
import logging.config
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

ROOT_LOGGER = "resume_insight"

FORMATS = {
    "simple": "%(levelname)s - %(name)s - %(message)s",
    "detailed": "%(asctime)s | %(levelname)-8s | %(name)-30s | %(funcName)-20s:%(lineno)-4d | %(message)s",
}


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = False,
    format_style: str = "detailed"
) -> None:
    """
    Configure the resume_insight logger tree

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files, created when file logging is on
        enable_console: Log to stdout
        enable_file: Log to rotating files (all records plus an errors-only file)
        format_style: 'simple' or 'detailed'
    """
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": FORMATS.get(format_style, FORMATS["detailed"]),
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": FORMATS["simple"]
            }
        },
        "handlers": {},
        "loggers": {
            ROOT_LOGGER: {
                "level": level,
                "handlers": [],
                "propagate": False
            }
        }
    }

    if enable_console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "simple" if format_style == "simple" else "detailed",
            "stream": "ext://sys.stdout"
        }
        config["loggers"][ROOT_LOGGER]["handlers"].append("console")

    log_file = None
    if enable_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d')
        log_file = path / f"resume_insight_{stamp}.log"
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": str(log_file),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "encoding": "utf8"
        }
        config["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "detailed",
            "filename": str(path / f"resume_insight_errors_{stamp}.log"),
            "maxBytes": 10485760,
            "backupCount": 5,
            "encoding": "utf8"
        }
        config["loggers"][ROOT_LOGGER]["handlers"].extend(["file", "error_file"])

    logging.config.dictConfig(config)

    logger = get_logger("logging")
    logger.info(f"Logging configured - Level: {level}, Console: {enable_console}, File: {enable_file}")
    if log_file:
        logger.info(f"Log file: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the resume_insight namespace

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_for_environment(settings=None):
    """Configure logging from Settings (environment variables by default)"""
    if settings is None:
        from settings import get_settings
        settings = get_settings()

    if settings.environment == "production":
        setup_logging(
            level=settings.log_level,
            log_dir=settings.log_dir,
            enable_file=settings.log_to_file,
            format_style="detailed"
        )
    elif settings.environment == "testing":
        setup_logging(level="WARNING", enable_file=False, format_style="simple")
    else:
        setup_logging(
            level="DEBUG",
            log_dir=settings.log_dir,
            enable_file=settings.log_to_file,
            format_style="detailed"
        )


class PerformanceMonitor:
    """Context manager that logs how long an operation took"""

    def __init__(self, operation_name: str, logger: logging.Logger = None, threshold_ms: float = 1000):
        self.operation_name = operation_name
        self.logger = logger or get_logger("performance")
        self.threshold_ms = threshold_ms
        self.start_time = None
        self.elapsed_ms = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(f"Starting {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.time() - self.start_time) * 1000

        if exc_type is not None:
            self.logger.error(f"{self.operation_name} failed after {self.elapsed_ms:.2f}ms: {exc_val}")
        elif self.elapsed_ms > self.threshold_ms:
            self.logger.warning(
                f"{self.operation_name} completed in {self.elapsed_ms:.2f}ms "
                f"(exceeded threshold {self.threshold_ms}ms)"
            )
        else:
            self.logger.info(f"{self.operation_name} completed in {self.elapsed_ms:.2f}ms")
