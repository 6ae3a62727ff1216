# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import logging

import pytest
import requests

from jules_client.core.config import JulesConfig
from jules_client.core.errors import ApiError, TransportError
from jules_client.core.telemetry import TelemetryConfig, _RequestLogger
from jules_client.data._api import _ApiClient

from fixtures.scripted_http import DummyHTTP

BASE = "https://jules.example.com/v1alpha/"


class TestTelemetryConfig:
    def test_defaults(self):
        config = TelemetryConfig()
        assert config.enable_logging is False
        assert config.log_level == "WARNING"
        assert config.logger_name == "jules_client"

    def test_disabled_logger_is_noop(self):
        logger = _RequestLogger()
        assert logger.is_enabled is False
        logger.request_completed("get", "sessions", 200, 1.0)


def _logging_api(responses):
    config = JulesConfig(telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG"))
    api = _ApiClient("secret-key", BASE, config)
    api._http = DummyHTTP(responses)
    return api


def test_success_logged_at_debug(caplog):
    api = _logging_api([(200, {"sessions": []})])

    with caplog.at_level(logging.DEBUG, logger="jules_client"):
        api._execute("get", "sessions", lambda d: d)

    [record] = caplog.records
    assert record.levelno == logging.DEBUG
    assert record.getMessage().startswith("GET sessions 200")


def test_error_status_logged_at_warning(caplog):
    api = _logging_api([(404, "not found")])

    with caplog.at_level(logging.DEBUG, logger="jules_client"):
        with pytest.raises(ApiError):
            api._execute("get", "sessions/x", lambda d: d)

    assert any(r.levelno == logging.WARNING and "404" in r.getMessage() for r in caplog.records)


def test_transport_failure_logged_without_api_key(caplog):
    api = _logging_api([requests.exceptions.ConnectionError("refused")])

    with caplog.at_level(logging.DEBUG, logger="jules_client"):
        with pytest.raises(TransportError):
            api._execute("get", "sessions", lambda d: d)

    messages = [r.getMessage() for r in caplog.records]
    assert any("failed" in m for m in messages)
    assert not any("secret-key" in m for m in messages)


def test_nothing_logged_by_default(caplog):
    api = _ApiClient("k", BASE)
    api._http = DummyHTTP([(200, {})])

    with caplog.at_level(logging.DEBUG, logger="jules_client"):
        api._execute("get", "sessions", lambda d: d)

    assert caplog.records == []
