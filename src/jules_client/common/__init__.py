# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common utilities and constants for the Jules client.

This module contains shared constants used across the client.
"""

__all__ = []
