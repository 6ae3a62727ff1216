# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the Jules client.

This module contains the low-level request executor used by the operation
namespaces. It is internal and not part of the public API.
"""

__all__ = []
