# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespaces for the Jules client.

- ``client.sessions``: :class:`~jules_client.operations.sessions.SessionOperations`
- ``client.activities``: :class:`~jules_client.operations.activities.ActivityOperations`
- ``client.sources``: :class:`~jules_client.operations.sources.SourceOperations`
"""

__all__ = []
