# SPDX-License-Identifier: MPL-2.0
"""Runtime configuration for Receipt Points.

Settings are read from environment variables. Defaults suit local development.
"""

import logging
import os
from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator

from receipt_points.core.exceptions import ConfigurationError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_RATE_LIMIT = "100/minute"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Configuration for the Receipt Points service."""

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = DEFAULT_LOG_LEVEL
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    rate_limit: str = DEFAULT_RATE_LIMIT

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        origins = os.getenv("ALLOWED_ORIGINS", "*")
        try:
            return cls(
                host=os.getenv("RECEIPT_POINTS_HOST", DEFAULT_HOST),
                port=os.getenv("RECEIPT_POINTS_PORT", str(DEFAULT_PORT)),
                log_level=os.getenv("RECEIPT_POINTS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
                allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
                rate_limit=os.getenv("RATE_LIMIT", DEFAULT_RATE_LIMIT),
            )
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid configuration", details={"errors": e.errors()}
            ) from e


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
