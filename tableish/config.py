"""Structured configuration with validation.

Usage:
    from tableish.config import get_config

    config = get_config()
    if config.extraction.detect_xpath:
        print("XPath queries are recognised")

Settings are read from the environment (and a ``.env`` file, if present):

    TABLEISH_DETECT_XPATH   treat "/..", "./..", "../.." and "(..." queries as XPath (default true)
    TABLEISH_ENCODING       encoding used when markup is passed as bytes
    TABLEISH_LOG_LEVEL      DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    TABLEISH_LOG_TO_FILE    also write a daily log file (default false)
    TABLEISH_LOGS_DIR       directory for log files (default ./logs)
"""

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ExtractionConfig:
    """Table extraction behaviour."""

    detect_xpath: bool = True
    encoding: Optional[str] = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    logs_dir: Path = field(default_factory=lambda: Path("logs"))

    def __post_init__(self):
        """Validate configuration values."""
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")


@dataclass(frozen=True)
class TableishConfig:
    """Top-level configuration object."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_environment(cls) -> "TableishConfig":
        """Create configuration from environment variables and defaults."""
        return cls(
            extraction=ExtractionConfig(
                detect_xpath=_env_flag("TABLEISH_DETECT_XPATH", "true"),
                encoding=os.getenv("TABLEISH_ENCODING") or None,
            ),
            logging=LoggingConfig(
                level=os.getenv("TABLEISH_LOG_LEVEL", "INFO").strip().upper(),
                log_to_file=_env_flag("TABLEISH_LOG_TO_FILE", "false"),
                logs_dir=Path(os.getenv("TABLEISH_LOGS_DIR", "logs")),
            ),
        )


# Thread-safe singleton
_config: Optional[TableishConfig] = None
_config_lock = threading.Lock()


def get_config() -> TableishConfig:
    """
    Get the singleton configuration instance.

    Thread-safe with double-checked locking pattern.
    Configuration is created once on first access.

    Returns:
        The library configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = TableishConfig.from_environment()
    return _config


def reset_config() -> None:
    """
    Reset the configuration singleton.

    Useful for testing with different configurations.
    """
    global _config
    with _config_lock:
        _config = None
