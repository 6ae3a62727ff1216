# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Session records for the Jules API.

A session is a contiguous unit of agent work: a prompt describing the task
and the source repository the agent works on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ._wire import (
    _drop_none,
    _expect_object,
    _format_timestamp,
    _optional_str,
    _parse_optional_timestamp,
    _require,
    _require_str,
)


class AutomationMode(str, Enum):
    """Controls whether certain actions are performed automatically."""

    AUTOMATION_MODE_UNSPECIFIED = "AUTOMATION_MODE_UNSPECIFIED"
    AUTO_CREATE_PR = "AUTO_CREATE_PR"
    """Create a pull request automatically when code changes are ready."""


class SessionState(str, Enum):
    """Lifecycle state of a session."""

    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    QUEUED = "QUEUED"
    PLANNING = "PLANNING"
    AWAITING_PLAN_APPROVAL = "AWAITING_PLAN_APPROVAL"
    AWAITING_USER_FEEDBACK = "AWAITING_USER_FEEDBACK"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    FAILED = "FAILED"
    COMPLETED = "COMPLETED"


@dataclass
class GitHubRepoContext:
    """
    GitHub-specific context for a session.

    :param starting_branch: Branch the session starts from.
    :type starting_branch: str
    """

    starting_branch: str

    def to_dict(self) -> Dict[str, Any]:
        return {"startingBranch": self.starting_branch}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "GitHubRepoContext":
        data = _expect_object(response_data, "githubRepoContext")
        return cls(starting_branch=_require_str(data, "startingBranch"))


@dataclass
class SourceContext:
    """
    The source a session works on.

    :param source: Source resource name, e.g. ``"sources/github/octo/repo"``.
    :type source: str
    :param github_repo_context: Optional GitHub context.
    :type github_repo_context: GitHubRepoContext | None
    """

    source: str
    github_repo_context: Optional[GitHubRepoContext] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "source": self.source,
                "githubRepoContext": self.github_repo_context.to_dict() if self.github_repo_context else None,
            }
        )

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "SourceContext":
        data = _expect_object(response_data, "sourceContext")
        repo_ctx = data.get("githubRepoContext")
        return cls(
            source=_require_str(data, "source"),
            github_repo_context=GitHubRepoContext.from_api_response(repo_ctx) if repo_ctx is not None else None,
        )


@dataclass
class PullRequest:
    """A pull request opened by a session."""

    url: str
    title: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "title": self.title, "description": self.description}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "PullRequest":
        data = _expect_object(response_data, "pullRequest")
        return cls(
            url=_require_str(data, "url"),
            title=_require_str(data, "title"),
            description=data.get("description") or "",
        )


@dataclass
class SessionOutput:
    """An output produced by a session."""

    pull_request: Optional[PullRequest] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({"pullRequest": self.pull_request.to_dict() if self.pull_request else None})

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "SessionOutput":
        data = _expect_object(response_data, "output")
        pr = data.get("pullRequest")
        return cls(pull_request=PullRequest.from_api_response(pr) if pr is not None else None)


@dataclass
class Session:
    """
    A coding session.

    Only ``prompt``, ``source_context``, ``title``, ``require_plan_approval``
    and ``automation_mode`` are sent when creating a session. The remaining
    fields are populated by the server and are never serialized by
    :meth:`to_dict`.

    :param prompt: Task description for the agent.
    :type prompt: str
    :param source_context: Repository the session works on.
    :type source_context: SourceContext
    :param title: Optional title.
    :type title: str | None
    :param require_plan_approval: Whether the plan needs explicit approval.
    :type require_plan_approval: bool | None
    :param automation_mode: Automation behaviour.
    :type automation_mode: AutomationMode | None

    Example:
        Create a session::

            session = Session(
                prompt="Fix the login bug",
                source_context=SourceContext(
                    source="sources/github/octo/app",
                    github_repo_context=GitHubRepoContext(starting_branch="main"),
                ),
                require_plan_approval=True,
            )
            created = client.sessions.create(session)
            print(created.name, created.state)
    """

    prompt: str
    source_context: SourceContext
    title: Optional[str] = None
    require_plan_approval: Optional[bool] = None
    automation_mode: Optional[AutomationMode] = None

    # Output only
    name: Optional[str] = None
    id: Optional[str] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    state: Optional[SessionState] = None
    url: Optional[str] = None
    outputs: Optional[List[SessionOutput]] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the request payload.

        Output-only fields are omitted even when set.
        """
        return _drop_none(
            {
                "prompt": self.prompt,
                "sourceContext": self.source_context.to_dict(),
                "title": self.title,
                "requirePlanApproval": self.require_plan_approval,
                "automationMode": self.automation_mode.value if self.automation_mode is not None else None,
            }
        )

    def to_full_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary including output-only fields."""
        payload = self.to_dict()
        payload.update(
            _drop_none(
                {
                    "name": self.name,
                    "id": self.id,
                    "createTime": _format_timestamp(self.create_time) if self.create_time else None,
                    "updateTime": _format_timestamp(self.update_time) if self.update_time else None,
                    "state": self.state.value if self.state is not None else None,
                    "url": self.url,
                    "outputs": [o.to_dict() for o in self.outputs] if self.outputs is not None else None,
                }
            )
        )
        return payload

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Session":
        """
        Create a Session from an API response.

        :raises KeyError: If a required field is missing.
        :raises ValueError: If an enum value or timestamp is not recognised.
        :raises TypeError: If a field has the wrong JSON type.
        """
        data = _expect_object(response_data, "session")
        mode = data.get("automationMode")
        state = data.get("state")
        outputs = data.get("outputs")
        if outputs is not None and not isinstance(outputs, list):
            raise TypeError("'outputs' must be a list")
        require_approval = data.get("requirePlanApproval")
        if require_approval is not None and not isinstance(require_approval, bool):
            raise TypeError("'requirePlanApproval' must be a boolean")
        return cls(
            prompt=_require_str(data, "prompt"),
            source_context=SourceContext.from_api_response(_require(data, "sourceContext")),
            title=_optional_str(data, "title"),
            require_plan_approval=require_approval,
            automation_mode=AutomationMode(mode) if mode is not None else None,
            name=_optional_str(data, "name"),
            id=_optional_str(data, "id"),
            create_time=_parse_optional_timestamp(data.get("createTime")),
            update_time=_parse_optional_timestamp(data.get("updateTime")),
            state=SessionState(state) if state is not None else None,
            url=_optional_str(data, "url"),
            outputs=[SessionOutput.from_api_response(o) for o in outputs] if outputs is not None else None,
        )


__all__ = [
    "AutomationMode",
    "SessionState",
    "GitHubRepoContext",
    "SourceContext",
    "PullRequest",
    "SessionOutput",
    "Session",
]
