# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the Jules REST API.

These constants define the fixed service address, request headers and the
collection paths used by the resource operations.
"""

JULES_API_BASE_URL = "https://jules.googleapis.com/v1alpha/"
"""Base address of the Jules API. Relative resource paths are joined against it."""

# Request headers
HEADER_API_KEY = "X-Goog-Api-Key"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
MIME_JSON = "application/json"

# Collection paths
SESSIONS_COLLECTION = "sessions"
SOURCES_COLLECTION = "sources"
ACTIVITIES_COLLECTION = "activities"

# Custom methods on a session resource, sent as ``{session}:{action}``
ACTION_SEND_MESSAGE = "sendMessage"
ACTION_APPROVE_PLAN = "approvePlan"

# Query parameter names
PARAM_PAGE_SIZE = "pageSize"
PARAM_PAGE_TOKEN = "pageToken"
PARAM_FILTER = "filter"

MAX_PAGE_SIZE = 100
"""Largest page size accepted by the API; used by the streaming helpers."""
