# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured error types for the Jules client.

Every public operation fails with exactly one of the concrete classes below.
Errors raised by ``requests`` or by JSON handling never escape the package
directly; they are wrapped and kept as ``__cause__``.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import (
    API_ERROR,
    DECODE_ERROR,
    INVALID_ENDPOINT,
    INVALID_RESOURCE_NAME,
    TRANSPORT_ERROR,
    _http_subcode,
)


class JulesError(Exception):
    """
    Base structured error for the Jules client.

    :param message: Human readable description.
    :type message: :class:`str`
    :param code: Stable error code, one of ``core._error_codes.ALL_ERROR_CODES``.
    :type code: :class:`str`
    :param subcode: Optional finer-grained code (for example ``http_404``).
    :type subcode: :class:`str` | None
    :param status_code: HTTP status code, when the error came from a response.
    :type status_code: :class:`int` | None
    :param details: Extra diagnostic values.
    :type details: :class:`dict` | None
    :param source: ``"client"`` or ``"server"``.
    :type source: :class:`str` | None
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class TransportError(JulesError):
    """The HTTP send failed (DNS, connection, TLS, transport timeout)."""

    def __init__(self, message: str, *, error: Optional[BaseException] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=TRANSPORT_ERROR, details=details, source="client")
        self.error = error


class DecodeError(JulesError):
    """A request or response body could not be converted to or from JSON."""

    def __init__(
        self,
        message: str,
        *,
        error: Optional[BaseException] = None,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code=DECODE_ERROR, subcode=subcode, details=details, source="client")
        self.error = error


class InvalidEndpointError(JulesError):
    """The base address or a joined resource path is not a well-formed URL."""

    def __init__(self, message: str, *, url: Optional[str] = None):
        d = {"url": url} if url is not None else None
        super().__init__(message, code=INVALID_ENDPOINT, details=d, source="client")
        self.url = url


class ApiError(JulesError):
    """
    The server answered with a non-success HTTP status.

    ``message`` carries the raw response body text, or ``""`` if the body
    could not be read.
    """

    def __init__(self, status_code: int, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message,
            code=API_ERROR,
            subcode=_http_subcode(status_code),
            status_code=status_code,
            details=details,
            source="server",
        )

    @property
    def status(self) -> int:
        return self.status_code

    def __str__(self) -> str:
        return f"API error (status {self.status_code}): {self.message}"


class InvalidResourceNameError(JulesError):
    """
    A resource name does not have the ``collection/id`` shape.

    Reserved: no current operation validates resource names.
    """

    def __init__(self, name: str):
        super().__init__(
            f"Invalid resource name: {name!r}",
            code=INVALID_RESOURCE_NAME,
            details={"name": name},
            source="client",
        )
        self.name = name


__all__ = [
    "JulesError",
    "TransportError",
    "DecodeError",
    "InvalidEndpointError",
    "ApiError",
    "InvalidResourceNameError",
]
