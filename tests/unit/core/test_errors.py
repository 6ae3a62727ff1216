# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest
import requests

from jules_client.core._error_codes import (
    ALL_ERROR_CODES,
    API_ERROR,
    DECODE_ERROR,
    HTTP_404,
    INVALID_ENDPOINT,
    INVALID_RESOURCE_NAME,
    TRANSPORT_ERROR,
)
from jules_client.core.errors import (
    ApiError,
    DecodeError,
    InvalidEndpointError,
    InvalidResourceNameError,
    JulesError,
    TransportError,
)


def test_api_error_fields():
    err = ApiError(404, "not found")
    assert err.status_code == 404
    assert err.status == 404
    assert err.message == "not found"
    assert err.code == API_ERROR
    assert err.subcode == HTTP_404
    assert err.source == "server"
    assert "404" in str(err) and "not found" in str(err)


def test_api_error_unmapped_status_subcode():
    assert ApiError(418, "").subcode == "http_418"


def test_transport_error_keeps_wrapped_error():
    cause = requests.exceptions.ConnectionError("refused")
    err = TransportError("GET sessions failed", error=cause)
    assert err.error is cause
    assert err.code == TRANSPORT_ERROR
    assert err.source == "client"


def test_decode_error_code():
    err = DecodeError("bad body", error=ValueError("x"))
    assert err.code == DECODE_ERROR
    assert isinstance(err.error, ValueError)


def test_invalid_endpoint_details():
    err = InvalidEndpointError("bad url", url="ftp://x")
    assert err.code == INVALID_ENDPOINT
    assert err.details == {"url": "ftp://x"}


def test_invalid_resource_name_is_reserved_kind():
    err = InvalidResourceNameError("nope")
    assert err.code == INVALID_RESOURCE_NAME
    assert err.name == "nope"


@pytest.mark.parametrize(
    "err",
    [
        TransportError("t"),
        DecodeError("d"),
        InvalidEndpointError("e"),
        ApiError(500, "boom"),
        InvalidResourceNameError("n"),
    ],
)
def test_every_kind_is_a_jules_error_with_known_code(err):
    assert isinstance(err, JulesError)
    assert err.code in ALL_ERROR_CODES
    d = err.to_dict()
    assert d["code"] == err.code
    assert d["timestamp"].endswith("Z")
