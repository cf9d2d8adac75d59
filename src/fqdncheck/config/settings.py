"""Runtime settings — the CLI flag plus ``FQDNCHECK_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs  — the ``-v`` argument parsed by the CLI
  2. Env vars     — ``FQDNCHECK_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from fqdncheck.config.logging import configure_logging


class CheckSettings(BaseSettings):
    """Settings for a single fqdncheck invocation.

    Attributes:
        verbose: Print diagnostic and summary lines on stdout.
        log_level: Level for the ``fqdncheck`` logger on stderr.
        log_json: Emit log records as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FQDNCHECK_",
    }

    verbose: bool = False
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        name = value.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return name

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CheckSettings:
        """Build settings with CLI values taking priority over the environment.

        A bad ``FQDNCHECK_*`` value never changes the verdict: the
        environment is ignored, the defaults plus *cli_flags* are used,
        and a warning goes to stderr.
        """
        try:
            return cls(**cli_flags)
        except ValidationError as exc:
            fallback = cls.model_construct(**cli_flags)
            configure_logging(level=fallback.log_level, log_json=fallback.log_json)
            structlog.get_logger(__name__).warning(
                "ignoring invalid configuration",
                fields=sorted({".".join(map(str, err["loc"])) for err in exc.errors()}),
                detail=str(exc),
            )
            return fallback
