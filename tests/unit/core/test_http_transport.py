# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from jules_client.core._http import _HttpClient


class TestHttpClient:
    """The transport sends exactly once and applies only a configured timeout."""

    @patch("requests.request")
    def test_no_timeout_by_default(self, mock_request):
        mock_request.return_value = Mock(status_code=200)

        _HttpClient()._request("get", "https://x.example/a")

        _, kwargs = mock_request.call_args
        assert "timeout" not in kwargs

    @patch("requests.request")
    def test_configured_timeout_applied(self, mock_request):
        mock_request.return_value = Mock(status_code=200)

        _HttpClient(timeout=7.5)._request("get", "https://x.example/a")

        assert mock_request.call_args.kwargs["timeout"] == 7.5

    @patch("requests.request")
    def test_explicit_timeout_wins(self, mock_request):
        mock_request.return_value = Mock(status_code=200)

        _HttpClient(timeout=7.5)._request("get", "https://x.example/a", timeout=1)

        assert mock_request.call_args.kwargs["timeout"] == 1

    @patch("requests.request")
    def test_network_error_not_retried(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("down")

        with pytest.raises(requests.exceptions.ConnectionError):
            _HttpClient()._request("get", "https://x.example/a")

        assert mock_request.call_count == 1

    @patch("requests.request")
    def test_error_status_not_retried(self, mock_request):
        mock_request.return_value = Mock(status_code=503)

        r = _HttpClient()._request("get", "https://x.example/a")

        assert r.status_code == 503
        assert mock_request.call_count == 1

    def test_session_used_when_provided(self):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200)

        with patch("requests.request") as mock_request:
            _HttpClient(session=session)._request("post", "https://x.example/a", data="{}")

        session.request.assert_called_once_with("post", "https://x.example/a", data="{}")
        mock_request.assert_not_called()

    def test_close_idempotent(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)

        client.close()
        client.close()

        session.close.assert_called_once()
