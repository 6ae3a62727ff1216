# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models for Jules API resources.

This module provides dataclasses for the records exchanged with the API:

- :mod:`~jules_client.models.session`: sessions, automation modes and states.
- :mod:`~jules_client.models.activity`: activities and their artifacts.
- :mod:`~jules_client.models.source`: connected source repositories.

Every record offers ``to_dict()`` for the JSON wire format and
``from_api_response()`` to decode a response object.

Note:
    This ``__init__.py`` does NOT import/export models.
    Import directly from the specific module files.
"""

__all__ = []
