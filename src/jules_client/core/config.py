# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class JulesConfig:
    """
    Configuration settings for Jules client operations.

    :param http_timeout: Request timeout in seconds passed to the transport.
        ``None`` (default) leaves timeouts to the transport.
    :type http_timeout: float or None
    :param telemetry: Logging configuration. Logging is off by default.
    :type telemetry: ~jules_client.core.telemetry.TelemetryConfig
    """

    http_timeout: Optional[float] = None
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)

    @classmethod
    def from_env(cls) -> "JulesConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~jules_client.core.config.JulesConfig
        """
        # Environment-free defaults
        return cls(
            http_timeout=None,
            telemetry=TelemetryConfig(),
        )
