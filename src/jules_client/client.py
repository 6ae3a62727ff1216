# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional

import requests

from .common.constants import JULES_API_BASE_URL
from .core.config import JulesConfig
from .data._api import _ApiClient
from .operations.activities import ActivityOperations
from .operations.sessions import SessionOperations
from .operations.sources import SourceOperations


class JulesClient:
    """
    High-level client for the Jules API.

    Operations are grouped in namespaces:

    - ``client.sessions``: create, get, delete, list and stream sessions; send
      messages and approve plans.
    - ``client.activities``: get, list and stream the activities of a session.
    - ``client.sources``: get, list and stream connected repositories.

    The base address is fixed to ``https://jules.googleapis.com/v1alpha/``.
    The client keeps no per-request state and can be shared between threads.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases the pool on exit::

            with JulesClient(api_key) as client:
                for session in client.sessions.iter():
                    print(session.title)

    **Without Context Manager**:
        Each request opens its own connection. Call ``close()`` when done::

            client = JulesClient(api_key)
            try:
                page = client.sessions.list(page_size=10)
            finally:
                client.close()

    :param api_key: API key from the Jules settings page. Sent with every request.
    :type api_key: :class:`str`
    :param config: Optional configuration for timeouts and logging.
        If not provided, defaults are loaded from :meth:`~jules_client.core.config.JulesConfig.from_env`.
    :type config: ~jules_client.core.config.JulesConfig or None

    :raises ValueError: If ``api_key`` is missing or empty, or cannot be encoded as an HTTP header value.
    :raises ~jules_client.core.errors.InvalidEndpointError: If the base address is not a valid URL.
    """

    def __init__(self, api_key: str, config: Optional[JulesConfig] = None) -> None:
        if not api_key:
            raise ValueError("api_key is required.")
        try:
            # Header values go out as latin-1
            api_key.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ValueError("api_key contains characters that cannot be sent in an HTTP header.") from e
        self._api_key = api_key
        self._base_url = JULES_API_BASE_URL
        _ApiClient._check_url(self._base_url)
        self._config = config or JulesConfig.from_env()
        self._api: Optional[_ApiClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.sessions = SessionOperations(self)
        self.activities = ActivityOperations(self)
        self.sources = SourceOperations(self)

    def __enter__(self) -> "JulesClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context reuse this session.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Rebuild the executor so it picks up the pooled session
            self._api = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager and release the HTTP session. Exceptions are not suppressed."""
        self.close()

    def close(self) -> None:
        """
        Explicitly close the client and release resources.

        Safe to call multiple times. Called automatically by the context manager.
        """
        if self._api is not None:
            self._api.close()
            self._api = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_api(self) -> _ApiClient:
        """
        Get or create the internal request executor.

        The executor is created on the first API call. When a session exists
        (from the context manager), it is used for connection pooling.

        :rtype: ~jules_client.data._api._ApiClient
        """
        if self._api is None:
            self._api = _ApiClient(
                self._api_key,
                self._base_url,
                self._config,
                session=self._session,
            )
        return self._api


__all__ = ["JulesClient"]
