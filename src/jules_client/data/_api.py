# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level request execution for the Jules API.

:class:`_ApiClient` is the single place where an operation becomes an HTTP
request: it resolves the URL, injects the credential, sends the request and
turns the response into a decoded value or a
:class:`~jules_client.core.errors.JulesError`.
"""

from __future__ import annotations

import json
import time
from typing import Any, Callable, Dict, Optional, TypeVar
from urllib.parse import urljoin, urlsplit

import requests

from ..common.constants import (
    HEADER_ACCEPT,
    HEADER_API_KEY,
    HEADER_CONTENT_TYPE,
    MIME_JSON,
    PARAM_FILTER,
    PARAM_PAGE_SIZE,
    PARAM_PAGE_TOKEN,
)
from ..core._error_codes import DECODE_REQUEST_BODY, DECODE_RESPONSE_BODY
from ..core._http import _HttpClient
from ..core.config import JulesConfig
from ..core.errors import ApiError, DecodeError, InvalidEndpointError, TransportError
from ..core.telemetry import _RequestLogger

T = TypeVar("T")

Decoder = Callable[[Any], T]


def _page_params(
    page_size: Optional[int] = None,
    page_token: Optional[str] = None,
    filter: Optional[str] = None,
) -> Dict[str, Any]:
    """Query parameters for a list call. Absent or empty values are left out."""
    params: Dict[str, Any] = {}
    if filter:
        params[PARAM_FILTER] = filter
    if page_size is not None:
        params[PARAM_PAGE_SIZE] = page_size
    if page_token:
        params[PARAM_PAGE_TOKEN] = page_token
    return params


class _ApiClient:
    """
    Jules API request executor.

    :param api_key: Opaque credential sent with every request.
    :type api_key: str
    :param base_url: Absolute base address; relative paths are joined against it.
    :type base_url: str
    :param config: Client configuration.
    :type config: ~jules_client.core.config.JulesConfig or None
    :param session: Optional pooled session shared by all requests.
    :type session: requests.Session or None

    :raises ~jules_client.core.errors.InvalidEndpointError: If ``base_url`` is not an absolute http(s) URL.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        config: Optional[JulesConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        # urljoin drops the last path segment of a base without a trailing slash
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._check_url(self.base_url)
        self.config = config or JulesConfig.from_env()
        self._http = _HttpClient(timeout=self.config.http_timeout, session=session)
        self._log = _RequestLogger(self.config.telemetry)

    @staticmethod
    def _check_url(url: str) -> str:
        try:
            parts = urlsplit(url)
            # Accessing .port validates it
            parts.port
        except ValueError as e:
            raise InvalidEndpointError(f"Malformed URL: {url!r}", url=url) from e
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise InvalidEndpointError(f"Not an absolute http(s) URL: {url!r}", url=url)
        return url

    def _build_url(self, path: str) -> str:
        """
        Resolve ``path`` against the base address.

        Relative paths (``"sessions"``) and server-returned resource names
        (``"sessions/abc123"``) both resolve under the base path.
        """
        try:
            url = urljoin(self.base_url, path)
        except ValueError as e:
            raise InvalidEndpointError(f"Cannot join {path!r} to the base URL", url=path) from e
        return self._check_url(url)

    def _headers(self, has_body: bool = False) -> Dict[str, str]:
        """Build request headers with the API key."""
        headers = {
            HEADER_API_KEY: self._api_key,
            HEADER_ACCEPT: MIME_JSON,
        }
        if has_body:
            headers[HEADER_CONTENT_TYPE] = MIME_JSON
        return headers

    def _execute(
        self,
        method: str,
        path: str,
        decode: Optional[Decoder] = None,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """
        Send one request and decode its response.

        :param method: HTTP method.
        :type method: str
        :param path: Relative path or resource name.
        :type path: str
        :param decode: Converts the parsed JSON body into the result type.
            ``None`` discards the body and returns ``None``.
        :type decode: Callable or None
        :param params: Query parameters; ``None`` values must already be removed.
        :type params: dict or None
        :param body: JSON-serializable request payload.
        :type body: Any

        :raises ~jules_client.core.errors.InvalidEndpointError: If the URL cannot be built.
        :raises ~jules_client.core.errors.TransportError: If the request could not be sent.
        :raises ~jules_client.core.errors.ApiError: If the status is not 2xx.
        :raises ~jules_client.core.errors.DecodeError: If a body cannot be encoded or decoded.
        """
        url = self._build_url(path)

        kwargs: Dict[str, Any] = {"headers": self._headers(has_body=body is not None)}
        if params:
            kwargs["params"] = params
        if body is not None:
            try:
                kwargs["data"] = json.dumps(body)
            except (TypeError, ValueError, RecursionError) as e:
                raise DecodeError(
                    f"Request body for {method.upper()} {path} is not JSON serializable: {e}",
                    error=e,
                    subcode=DECODE_REQUEST_BODY,
                ) from e

        start = time.perf_counter()
        try:
            r = self._http._request(method, url, **kwargs)
        except (requests.exceptions.RequestException, UnicodeEncodeError) as e:
            self._log.request_failed(method, path, e)
            raise TransportError(f"{method.upper()} {path} failed: {e}", error=e) from e
        self._log.request_completed(method, path, r.status_code, (time.perf_counter() - start) * 1000)

        if not 200 <= r.status_code < 300:
            raise ApiError(r.status_code, self._response_text(r))

        if decode is None:
            if r.text:
                self._parse_json(r, method, path)
            return None
        data = self._parse_json(r, method, path)
        try:
            return decode(data)
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(
                f"Unexpected response shape for {method.upper()} {path}: {type(e).__name__}: {e}",
                error=e,
                subcode=DECODE_RESPONSE_BODY,
            ) from e

    @staticmethod
    def _response_text(r: requests.Response) -> str:
        try:
            return r.text or ""
        except (requests.exceptions.RequestException, UnicodeDecodeError, LookupError):
            # Best effort: an unreadable error body yields an empty message
            return ""

    @staticmethod
    def _parse_json(r: requests.Response, method: str, path: str) -> Any:
        try:
            return r.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError(
                f"Response to {method.upper()} {path} is not valid JSON",
                error=e,
                subcode=DECODE_RESPONSE_BODY,
                details={"body_excerpt": (r.text or "")[:200]},
            ) from e

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        if self._http is not None:
            self._http.close()
