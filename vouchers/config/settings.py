"""
Application settings and configuration.

This module provides a centralized configuration management system using Pydantic.
It loads settings from environment variables, .env files, or falls back to defaults.
"""

import os
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

# Base directories
ROOT_DIR = Path(__file__).parent.parent.parent
LOG_DIR = ROOT_DIR / "logs"
DATA_DIR = ROOT_DIR / "data"


class VoucherSettings(BaseModel):
    """Voucher storage settings."""

    store_path: Path = Field(
        default=DATA_DIR / "vouchers.json",
        description="Location of the JSON voucher store used by the CLI"
    )


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format"
    )

    file_enabled: bool = Field(
        default=False,
        description="Whether to write logs to a file"
    )

    console_enabled: bool = Field(
        default=True,
        description="Whether to write logs to console"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate that log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


class Settings(BaseModel):
    """Main application settings."""

    app_name: str = Field(
        default="Voucher Service",
        description="Application name"
    )

    app_version: str = Field(
        default="0.1.0",
        description="Application version"
    )

    # Sub-configurations
    voucher: VoucherSettings = Field(default_factory=lambda: VoucherSettings(
        store_path=Path(os.environ.get("VOUCHER_STORE_PATH", str(DATA_DIR / "vouchers.json")))
    ))

    logging: LoggingSettings = Field(default_factory=lambda: LoggingSettings(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        format=os.environ.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        file_enabled=_parse_bool(os.environ.get("LOG_FILE_ENABLED", "False")),
        console_enabled=_parse_bool(os.environ.get("LOG_CONSOLE_ENABLED", "True"))
    ))

    # Paths
    root_dir: Path = ROOT_DIR
    logs_dir: Path = LOG_DIR
    data_dir: Path = DATA_DIR

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    def __init__(self, **data: Any):
        """Initialize settings, applying the debug mode override from the environment."""
        super().__init__(**data)

        self.debug_mode = _parse_bool(os.environ.get("DEBUG_MODE", str(self.debug_mode)))
        if self.debug_mode:
            logging.getLogger(__name__).debug("Debug mode enabled")

    def get_log_path(self, name: str) -> Path:
        """Get path for a component log file."""
        return self.logs_dir / f"{name}.log"


def _parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.lower() in ("true", "1", "t", "yes", "y")
