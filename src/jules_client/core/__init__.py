# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Jules client.

This module contains the foundational components including configuration,
the HTTP transport, error types, result types and pagination.
"""

from .results import Page

__all__ = [
    "Page",
]
