# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Source operations namespace."""

from __future__ import annotations

from typing import Iterator, Optional, TYPE_CHECKING

from ..common.constants import MAX_PAGE_SIZE, SOURCES_COLLECTION
from ..core.pagination import paginate
from ..core.results import Page
from ..data._api import _page_params
from ..models.source import Source

if TYPE_CHECKING:
    from ..client import JulesClient


class SourceOperations:
    """
    Source operations.

    Accessed via ``client.sources``. Sources are the repositories connected
    to the Jules account.
    """

    def __init__(self, client: "JulesClient") -> None:
        self._client = client

    def get(self, name: str) -> Source:
        """
        Get a source by resource name.

        :param name: Full resource name, e.g. ``"sources/github/octo/app"``.
        :type name: str
        :rtype: ~jules_client.models.source.Source
        """
        return self._client._get_api()._execute("get", name, Source.from_api_response)

    def list(
        self,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> Page[Source]:
        """
        List one page of sources.

        :param filter: Optional filter expression, sent verbatim.
        :type filter: str or None
        :param page_size: Maximum number of sources to return.
        :type page_size: int or None
        :param page_token: Token from a previous page.
        :type page_token: str or None
        :rtype: ~jules_client.core.results.Page
        """
        return self._client._get_api()._execute(
            "get",
            SOURCES_COLLECTION,
            lambda data: Page.from_api_response(data, "sources", Source.from_api_response),
            params=_page_params(page_size, page_token, filter=filter),
        )

    def iter(self, filter: Optional[str] = None, page_size: Optional[int] = MAX_PAGE_SIZE) -> Iterator[Source]:
        """Lazily iterate over all sources matching ``filter``."""
        return paginate(
            lambda size, token: self.list(filter=filter, page_size=size, page_token=token),
            page_size,
        )


__all__ = ["SourceOperations"]
