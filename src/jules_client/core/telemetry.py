# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Opt-in request logging for the Jules client.

Logging is disabled by default. When enabled through
:class:`TelemetryConfig`, every executed request emits one record on the
configured logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for client logging.

    Example:
        Log every request at DEBUG level::

            config = JulesConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )
    """

    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = "jules_client"


class _RequestLogger:
    """Writes one log record per request. Internal, not part of the public API."""

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._logger: Optional[logging.Logger] = None
        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    @property
    def is_enabled(self) -> bool:
        return self._logger is not None

    def request_completed(self, method: str, path: str, status_code: int, duration_ms: float) -> None:
        if not self._logger:
            return
        level = logging.WARNING if status_code >= 400 else logging.DEBUG
        self._logger.log(
            level,
            f"{method.upper()} {path} {status_code} {duration_ms:.1f}ms",
            extra={"http_method": method.upper(), "status_code": status_code},
        )

    def request_failed(self, method: str, path: str, error: BaseException) -> None:
        if not self._logger:
            return
        self._logger.warning(
            f"{method.upper()} {path} failed: {type(error).__name__}: {error}",
            extra={"http_method": method.upper()},
        )


__all__ = ["TelemetryConfig"]
