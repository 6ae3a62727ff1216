# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for JulesClient context manager support."""

import unittest
from unittest.mock import MagicMock

import requests

from jules_client.client import JulesClient


class TestContextManager(unittest.TestCase):
    """Test context manager support on JulesClient."""

    def test_enter_creates_session(self):
        client = JulesClient("k")
        self.assertIsNone(client._session)

        result = client.__enter__()

        self.assertIsInstance(client._session, requests.Session)
        self.assertTrue(client._owns_session)
        self.assertIs(result, client)

    def test_executor_uses_pooled_session(self):
        with JulesClient("k") as client:
            api = client._get_api()
            self.assertIs(api._http._session, client._session)

    def test_enter_after_first_call_rebuilds_executor(self):
        client = JulesClient("k")
        before = client._get_api()

        with client:
            after = client._get_api()

        self.assertIsNot(before, after)

    def test_exit_closes_session(self):
        client = JulesClient("k")
        client.__enter__()
        mock_session = MagicMock(spec=requests.Session)
        client._session = mock_session
        client._owns_session = True

        client.__exit__(None, None, None)

        mock_session.close.assert_called()
        self.assertIsNone(client._session)
        self.assertFalse(client._owns_session)

    def test_context_manager_protocol(self):
        with JulesClient("k") as client:
            self.assertIsInstance(client._session, requests.Session)

        self.assertIsNone(client._session)
        self.assertIsNone(client._api)

    def test_close_idempotent(self):
        client = JulesClient("k")
        client.__enter__()

        client.close()
        client.close()

    def test_close_without_enter(self):
        client = JulesClient("k")
        client._get_api()

        client.close()

        self.assertIsNone(client._api)

    def test_exception_not_suppressed(self):
        with self.assertRaises(RuntimeError):
            with JulesClient("k"):
                raise RuntimeError("boom")
