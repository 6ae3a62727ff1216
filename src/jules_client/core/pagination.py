# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Cursor-to-stream conversion for list operations.

:func:`paginate` turns any "list with page token" call into a lazy iterator
over individual items. Each call starts an independent pagination session
whose cursor lives only inside the returned generator.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, TypeVar

from ..common.constants import MAX_PAGE_SIZE
from .results import Page

T = TypeVar("T")

PageFetcher = Callable[[Optional[int], Optional[str]], Page[T]]
"""Signature of a page fetch: ``(page_size, page_token) -> Page``."""


def paginate(fetch_page: PageFetcher, page_size: Optional[int] = MAX_PAGE_SIZE) -> Iterator[T]:
    """
    Iterate over every item of a paginated collection.

    Pages are fetched one at a time, only when the items of the previous page
    have been consumed. Iteration ends after the first page whose
    ``next_page_token`` is missing or empty.

    A failed fetch is raised from the ``next()`` call that needed the page.
    It is the last element of the sequence: the generator is finished
    afterwards and no further page is requested.

    :param fetch_page: Callable receiving ``(page_size, page_token)`` and
        returning a :class:`~jules_client.core.results.Page`. The first call
        receives ``page_token=None``.
    :type fetch_page: Callable
    :param page_size: Page size sent with every request.
    :type page_size: int or None
    :return: Lazy iterator over items in server order.
    :rtype: Iterator

    Example::

        for session in paginate(client.sessions.list):
            print(session.name)
    """
    token: Optional[str] = None
    while True:
        page = fetch_page(page_size, token)
        yield from page.items
        if not page.next_page_token:
            return
        token = page.next_page_token


__all__ = ["paginate", "PageFetcher"]
