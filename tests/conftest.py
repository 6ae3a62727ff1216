# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Jules client tests.

This module provides common test fixtures and mock objects that can be used
across all test modules.
"""

import pytest

from jules_client.core.config import JulesConfig
from jules_client.data._api import _ApiClient

from fixtures.scripted_http import DummyHTTP


@pytest.fixture
def api_key():
    """Dummy API key."""
    return "test-key-12345"


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return JulesConfig(http_timeout=5)


@pytest.fixture
def sample_base_url():
    """Standard test base URL."""
    return "https://jules.example.com/v1alpha/"


@pytest.fixture
def scripted_api(api_key, sample_base_url, test_config):
    """Factory returning an ``_ApiClient`` whose transport replays ``responses``."""

    def _make(responses):
        api = _ApiClient(api_key, sample_base_url, test_config)
        api._http = DummyHTTP(responses)
        return api

    return _make
