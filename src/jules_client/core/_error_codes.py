# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Error codes, one per failure kind
TRANSPORT_ERROR = "transport_error"
DECODE_ERROR = "decode_error"
INVALID_ENDPOINT = "invalid_endpoint"
API_ERROR = "api_error"
INVALID_RESOURCE_NAME = "invalid_resource_name"

ALL_ERROR_CODES = {
    TRANSPORT_ERROR,
    DECODE_ERROR,
    INVALID_ENDPOINT,
    API_ERROR,
    INVALID_RESOURCE_NAME,
}

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

# Decode subcodes
DECODE_RESPONSE_BODY = "decode_response_body"
DECODE_REQUEST_BODY = "decode_request_body"


def _http_subcode(status: int) -> str:
    return f"http_{status}"
