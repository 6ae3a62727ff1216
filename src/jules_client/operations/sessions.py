# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Session operations namespace."""

from __future__ import annotations

from typing import Iterator, Optional, TYPE_CHECKING

from ..common.constants import (
    ACTION_APPROVE_PLAN,
    ACTION_SEND_MESSAGE,
    MAX_PAGE_SIZE,
    SESSIONS_COLLECTION,
)
from ..core.pagination import paginate
from ..core.results import Page
from ..data._api import _page_params
from ..models.session import Session

if TYPE_CHECKING:
    from ..client import JulesClient


class SessionOperations:
    """
    Session operations.

    Accessed via ``client.sessions``.

    Example:
        Create a session, approve its plan and follow up::

            created = client.sessions.create(session)
            client.sessions.approve_plan(created.name)
            client.sessions.send_message(created.name, "Also add tests.")

        List every session::

            for session in client.sessions.iter():
                print(session.name, session.state)
    """

    def __init__(self, client: "JulesClient") -> None:
        """
        Initialize SessionOperations.

        :param client: Parent JulesClient instance.
        :type client: JulesClient
        """
        self._client = client

    def create(self, session: Session) -> Session:
        """
        Create a new session.

        :param session: Session to create. Output-only fields are not sent.
        :type session: ~jules_client.models.session.Session
        :return: The created session with server-populated fields (name, id, state, ...).
        :rtype: ~jules_client.models.session.Session
        """
        api = self._client._get_api()
        return api._execute("post", SESSIONS_COLLECTION, Session.from_api_response, body=session.to_dict())

    def get(self, name: str) -> Session:
        """
        Get a session by resource name.

        :param name: Full resource name, e.g. ``"sessions/abc123"``.
        :type name: str
        :rtype: ~jules_client.models.session.Session
        """
        return self._client._get_api()._execute("get", name, Session.from_api_response)

    def delete(self, name: str) -> None:
        """
        Delete a session.

        :param name: Full resource name of the session.
        :type name: str
        """
        self._client._get_api()._execute("delete", name)

    def list(self, page_size: Optional[int] = None, page_token: Optional[str] = None) -> Page[Session]:
        """
        List one page of sessions.

        :param page_size: Maximum number of sessions to return; passed to the server as is.
        :type page_size: int or None
        :param page_token: Token from a previous page. Omitted from the request when ``None``.
        :type page_token: str or None
        :return: Page of sessions and the token for the next page.
        :rtype: ~jules_client.core.results.Page
        """
        return self._client._get_api()._execute(
            "get",
            SESSIONS_COLLECTION,
            lambda data: Page.from_api_response(data, "sessions", Session.from_api_response),
            params=_page_params(page_size, page_token),
        )

    def iter(self, page_size: Optional[int] = MAX_PAGE_SIZE) -> Iterator[Session]:
        """
        Lazily iterate over all sessions.

        Pages are fetched on demand. A failed fetch is raised from the
        iteration step that needed it and ends the iteration.

        :param page_size: Page size used for every request.
        :type page_size: int or None
        :rtype: Iterator[~jules_client.models.session.Session]
        """
        return paginate(lambda size, token: self.list(page_size=size, page_token=token), page_size)

    def send_message(self, name: str, prompt: str) -> None:
        """
        Send a message to an active session.

        :param name: Full resource name of the session.
        :type name: str
        :param prompt: The message.
        :type prompt: str
        """
        self._client._get_api()._execute("post", f"{name}:{ACTION_SEND_MESSAGE}", body={"prompt": prompt})

    def approve_plan(self, name: str) -> None:
        """
        Approve the pending plan of a session in ``AWAITING_PLAN_APPROVAL`` state.

        :param name: Full resource name of the session.
        :type name: str
        """
        self._client._get_api()._execute("post", f"{name}:{ACTION_APPROVE_PLAN}", body={})


__all__ = ["SessionOperations"]
