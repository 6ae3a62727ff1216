# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Activity operations namespace."""

from __future__ import annotations

from typing import Iterator, Optional, TYPE_CHECKING

from ..common.constants import ACTIVITIES_COLLECTION, MAX_PAGE_SIZE
from ..core.pagination import paginate
from ..core.results import Page
from ..data._api import _page_params
from ..models.activity import Activity

if TYPE_CHECKING:
    from ..client import JulesClient


class ActivityOperations:
    """
    Activity operations.

    Accessed via ``client.activities``. Activities belong to a session and
    are addressed through the session's resource name.

    Example::

        for activity in client.activities.iter("sessions/abc123"):
            print(activity.originator, type(activity.event).__name__)
    """

    def __init__(self, client: "JulesClient") -> None:
        self._client = client

    def get(self, name: str) -> Activity:
        """
        Get an activity by resource name.

        :param name: Full resource name, e.g. ``"sessions/123/activities/456"``.
        :type name: str
        :rtype: ~jules_client.models.activity.Activity
        """
        return self._client._get_api()._execute("get", name, Activity.from_api_response)

    def list(
        self,
        session_name: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> Page[Activity]:
        """
        List one page of activities of a session.

        :param session_name: Full resource name of the session.
        :type session_name: str
        :param page_size: Maximum number of activities to return.
        :type page_size: int or None
        :param page_token: Token from a previous page.
        :type page_token: str or None
        :rtype: ~jules_client.core.results.Page
        """
        return self._client._get_api()._execute(
            "get",
            f"{session_name}/{ACTIVITIES_COLLECTION}",
            lambda data: Page.from_api_response(data, "activities", Activity.from_api_response),
            params=_page_params(page_size, page_token),
        )

    def iter(self, session_name: str, page_size: Optional[int] = MAX_PAGE_SIZE) -> Iterator[Activity]:
        """
        Lazily iterate over all activities of a session, oldest page first.

        :param session_name: Full resource name of the session.
        :type session_name: str
        :rtype: Iterator[~jules_client.models.activity.Activity]
        """
        return paginate(
            lambda size, token: self.list(session_name, page_size=size, page_token=token),
            page_size,
        )


__all__ = ["ActivityOperations"]
