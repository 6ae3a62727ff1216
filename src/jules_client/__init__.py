# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Python client for the Jules API.

Example::

    from jules_client import JulesClient

    with JulesClient("YOUR_API_KEY") as client:
        page = client.sessions.list(page_size=10)
        for session in page:
            print(session.name, session.title)
"""

from .client import JulesClient

__version__ = "0.1.0"

__all__ = ["JulesClient", "__version__"]
