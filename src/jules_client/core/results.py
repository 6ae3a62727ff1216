# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for list operations.

:class:`Page` holds one page of a cursor-paginated list response: the items
in server order and the opaque token for the next page, if any.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    A single page of a list response.

    :param items: Items of this page, in the order returned by the server.
    :type items: :class:`list`
    :param next_page_token: Cursor for the next page. ``None`` or ``""`` means
        there are no further pages.
    :type next_page_token: :class:`str` | None

    Example:
        Walk pages by hand::

            token = None
            while True:
                page = client.sessions.list(page_size=50, page_token=token)
                for session in page:
                    print(session.name)
                if not page.has_more:
                    break
                token = page.next_page_token
    """

    items: List[T] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        """True when the server returned a non-empty continuation cursor."""
        return bool(self.next_page_token)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @classmethod
    def from_api_response(
        cls,
        response_data: Dict[str, Any],
        items_key: str,
        decode: Callable[[Dict[str, Any]], T],
    ) -> "Page[T]":
        """
        Build a page from a list response body.

        :param response_data: Decoded JSON object, e.g. ``{"sessions": [...], "nextPageToken": "t1"}``.
        :type response_data: dict[str, Any]
        :param items_key: Name of the array field holding the items.
        :type items_key: str
        :param decode: Converts one raw item into its record type.
        :type decode: Callable
        :raises TypeError: If the body or the items field has the wrong shape.
        """
        if not isinstance(response_data, dict):
            raise TypeError(f"expected a JSON object, got {type(response_data).__name__}")
        # Empty repeated fields are omitted from the response
        raw_items = response_data.get(items_key)
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise TypeError(f"'{items_key}' must be a list")
        token = response_data.get("nextPageToken")
        if token is not None and not isinstance(token, str):
            raise TypeError("'nextPageToken' must be a string")
        return cls(items=[decode(item) for item in raw_items], next_page_token=token)


__all__ = ["Page"]
