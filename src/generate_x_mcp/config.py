#!/usr/bin/env python3
# src/generate_x_mcp/config.py
"""
Run configuration - command-line values with environment fallbacks.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_CONNECT_DELAY,
    DEFAULT_OPENAPI_FILE,
    DEFAULT_TIMEOUT,
    ENV_CONNECT_DELAY,
    ENV_OPENAPI_FILE,
    ENV_REPLACE_EMPTY,
    ENV_TIMEOUT,
)
from .errors import ConfigurationError, format_validation_error

logger = logging.getLogger(__name__)


class SyncOptions(BaseModel):
    """Options for a single generation run."""

    server_url: str
    openapi_file: Path = Path(DEFAULT_OPENAPI_FILE)
    headers: dict[str, str] = Field(default_factory=dict)
    connect_delay: float = Field(default=DEFAULT_CONNECT_DELAY, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    replace_empty: bool = False

    @field_validator("server_url")
    @classmethod
    def _check_server_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http:// or https:// URL")
        return value

    @classmethod
    def from_sources(cls, environ: Mapping[str, str] | None = None, **values: Any) -> "SyncOptions":
        """Build options from explicit values, falling back to environment variables.

        Values passed as None are treated as unset.

        Raises:
            ConfigurationError: If any value fails validation.
        """
        env = os.environ if environ is None else environ
        fallbacks = {
            "openapi_file": ENV_OPENAPI_FILE,
            "connect_delay": ENV_CONNECT_DELAY,
            "timeout": ENV_TIMEOUT,
            "replace_empty": ENV_REPLACE_EMPTY,
        }

        data = {key: value for key, value in values.items() if value is not None}
        for key, env_var in fallbacks.items():
            if key not in data and env.get(env_var):
                logger.debug(f"Using {env_var}={env[env_var]!r} for {key}")
                data[key] = env[env_var]

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid options: {format_validation_error(e)}",
                suggestion="Run with --help to see the accepted values",
            ) from e


__all__ = ["SyncOptions"]
