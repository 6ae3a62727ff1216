# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Activity records for the Jules API.

An activity is one event within a session: a message, a generated or approved
plan, a progress update, or the session completing or failing. On the wire
the event kind is expressed by which one of several fields is set; here it is
decoded into :attr:`Activity.event`, an instance of exactly one event class.
Artifacts follow the same pattern through :attr:`Artifact.content`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Type, Union

from ._wire import (
    _drop_none,
    _expect_object,
    _format_timestamp,
    _optional_str,
    _parse_timestamp,
    _require,
    _require_str,
)


def _one_of(data: Dict[str, Any], kinds: Sequence[Type[Any]], what: str) -> Any:
    """Decode the single variant field set in ``data``."""
    present = [k for k in kinds if data.get(k.wire_field) is not None]
    if not present:
        expected = ", ".join(k.wire_field for k in kinds)
        raise ValueError(f"{what} has none of the fields: {expected}")
    if len(present) > 1:
        found = ", ".join(k.wire_field for k in present)
        raise ValueError(f"{what} has more than one of the fields: {found}")
    kind = present[0]
    return kind.from_api_response(data[kind.wire_field])


# ---------------------------------------------------------------- plans


@dataclass
class PlanStep:
    """
    One step of a plan.

    :param index: 0-based position of the step in the plan.
    :type index: int
    """

    id: str
    title: str
    description: str = ""
    index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description, "index": self.index}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "PlanStep":
        data = _expect_object(response_data, "planStep")
        index = data.get("index", 0)
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("'index' must be an integer")
        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            description=data.get("description") or "",
            index=index,
        )


@dataclass
class Plan:
    """A plan: ordered steps the agent intends to carry out."""

    id: str
    create_time: datetime
    steps: List[PlanStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "steps": [s.to_dict() for s in self.steps],
            "createTime": _format_timestamp(self.create_time),
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Plan":
        data = _expect_object(response_data, "plan")
        steps = data.get("steps") or []
        if not isinstance(steps, list):
            raise TypeError("'steps' must be a list")
        return cls(
            id=_require_str(data, "id"),
            steps=[PlanStep.from_api_response(s) for s in steps],
            create_time=_parse_timestamp(_require(data, "createTime")),
        )


# ---------------------------------------------------------------- events


@dataclass
class AgentMessaged:
    """The agent posted a message."""

    wire_field: ClassVar[str] = "agentMessaged"

    agent_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"agentMessage": self.agent_message}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "AgentMessaged":
        return cls(agent_message=_require_str(_expect_object(response_data, cls.wire_field), "agentMessage"))


@dataclass
class UserMessaged:
    """The user posted a message."""

    wire_field: ClassVar[str] = "userMessaged"

    user_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"userMessage": self.user_message}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "UserMessaged":
        return cls(user_message=_require_str(_expect_object(response_data, cls.wire_field), "userMessage"))


@dataclass
class PlanGenerated:
    """A plan was generated."""

    wire_field: ClassVar[str] = "planGenerated"

    plan: Plan

    def to_dict(self) -> Dict[str, Any]:
        return {"plan": self.plan.to_dict()}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "PlanGenerated":
        data = _expect_object(response_data, cls.wire_field)
        return cls(plan=Plan.from_api_response(_require(data, "plan")))


@dataclass
class PlanApproved:
    """A plan was approved."""

    wire_field: ClassVar[str] = "planApproved"

    plan_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"planId": self.plan_id}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "PlanApproved":
        return cls(plan_id=_require_str(_expect_object(response_data, cls.wire_field), "planId"))


@dataclass
class ProgressUpdated:
    """The agent reported progress."""

    wire_field: ClassVar[str] = "progressUpdated"

    title: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "description": self.description}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "ProgressUpdated":
        data = _expect_object(response_data, cls.wire_field)
        return cls(title=data.get("title") or "", description=data.get("description") or "")


@dataclass
class SessionCompleted:
    """The session completed. Its payload carries no fields and any JSON value is accepted."""

    wire_field: ClassVar[str] = "sessionCompleted"

    def to_dict(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_api_response(cls, response_data: Any) -> "SessionCompleted":
        return cls()


@dataclass
class SessionFailed:
    """The session failed."""

    wire_field: ClassVar[str] = "sessionFailed"

    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"reason": self.reason}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "SessionFailed":
        return cls(reason=_expect_object(response_data, cls.wire_field).get("reason") or "")


ActivityEvent = Union[
    AgentMessaged,
    UserMessaged,
    PlanGenerated,
    PlanApproved,
    ProgressUpdated,
    SessionCompleted,
    SessionFailed,
]

ACTIVITY_EVENT_TYPES: Tuple[Type[Any], ...] = (
    AgentMessaged,
    UserMessaged,
    PlanGenerated,
    PlanApproved,
    ProgressUpdated,
    SessionCompleted,
    SessionFailed,
)


# ---------------------------------------------------------------- artifacts


@dataclass
class GitPatch:
    """Code changes in unified diff format."""

    unidiff_patch: str
    base_commit_id: str
    suggested_commit_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "unidiffPatch": self.unidiff_patch,
                "baseCommitId": self.base_commit_id,
                "suggestedCommitMessage": self.suggested_commit_message,
            }
        )

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "GitPatch":
        data = _expect_object(response_data, "gitPatch")
        return cls(
            unidiff_patch=data.get("unidiffPatch") or "",
            base_commit_id=data.get("baseCommitId") or "",
            suggested_commit_message=_optional_str(data, "suggestedCommitMessage"),
        )


@dataclass
class ChangeSet:
    """A set of code changes against a source."""

    wire_field: ClassVar[str] = "changeSet"

    source: str
    git_patch: Optional[GitPatch] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "source": self.source,
                "gitPatch": self.git_patch.to_dict() if self.git_patch else None,
            }
        )

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "ChangeSet":
        data = _expect_object(response_data, cls.wire_field)
        patch = data.get("gitPatch")
        return cls(
            source=_require_str(data, "source"),
            git_patch=GitPatch.from_api_response(patch) if patch is not None else None,
        )


@dataclass
class Media:
    """A media file; ``data`` is base64 encoded."""

    wire_field: ClassVar[str] = "media"

    data: str
    mime_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"data": self.data, "mimeType": self.mime_type}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Media":
        data = _expect_object(response_data, cls.wire_field)
        return cls(data=_require_str(data, "data"), mime_type=_require_str(data, "mimeType"))


@dataclass
class BashOutput:
    """Output of a shell command run by the agent."""

    wire_field: ClassVar[str] = "bashOutput"

    command: str
    output: str = ""
    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "output": self.output, "exitCode": self.exit_code}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "BashOutput":
        data = _expect_object(response_data, cls.wire_field)
        exit_code = data.get("exitCode", 0)
        if not isinstance(exit_code, int) or isinstance(exit_code, bool):
            raise TypeError("'exitCode' must be an integer")
        return cls(command=_require_str(data, "command"), output=data.get("output") or "", exit_code=exit_code)


ArtifactContent = Union[ChangeSet, Media, BashOutput]

ARTIFACT_CONTENT_TYPES: Tuple[Type[Any], ...] = (ChangeSet, Media, BashOutput)


@dataclass
class Artifact:
    """An artifact produced during a session; ``content`` holds its single kind."""

    content: ArtifactContent

    def to_dict(self) -> Dict[str, Any]:
        return {self.content.wire_field: self.content.to_dict()}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Artifact":
        data = _expect_object(response_data, "artifact")
        return cls(content=_one_of(data, ARTIFACT_CONTENT_TYPES, "artifact"))


# ---------------------------------------------------------------- activity


@dataclass
class Activity:
    """
    One event within a session.

    :param name: Resource name, e.g. ``"sessions/123/activities/456"``.
    :type name: str
    :param id: Activity ID.
    :type id: str
    :param create_time: When the activity was created.
    :type create_time: datetime
    :param originator: ``"user"``, ``"agent"`` or ``"system"``.
    :type originator: str
    :param event: What happened; exactly one of the event classes.
    :type event: ActivityEvent
    :param description: Optional description.
    :type description: str | None
    :param artifacts: Artifacts produced by this activity.
    :type artifacts: list[Artifact] | None

    Example:
        React to the kind of event::

            for activity in client.activities.iter(session.name):
                if isinstance(activity.event, PlanGenerated):
                    for step in activity.event.plan.steps:
                        print(step.index, step.title)
    """

    name: str
    id: str
    create_time: datetime
    originator: str
    event: ActivityEvent
    description: Optional[str] = None
    artifacts: Optional[List[Artifact]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = _drop_none(
            {
                "name": self.name,
                "id": self.id,
                "description": self.description,
                "createTime": _format_timestamp(self.create_time),
                "originator": self.originator,
                "artifacts": [a.to_dict() for a in self.artifacts] if self.artifacts is not None else None,
            }
        )
        payload[self.event.wire_field] = self.event.to_dict()
        return payload

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Activity":
        """
        Create an Activity from an API response.

        :raises ValueError: If none, or more than one, of the event fields is set.
        """
        data = _expect_object(response_data, "activity")
        artifacts = data.get("artifacts")
        if artifacts is not None and not isinstance(artifacts, list):
            raise TypeError("'artifacts' must be a list")
        return cls(
            name=_require_str(data, "name"),
            id=_require_str(data, "id"),
            description=_optional_str(data, "description"),
            create_time=_parse_timestamp(_require(data, "createTime")),
            originator=_require_str(data, "originator"),
            event=_one_of(data, ACTIVITY_EVENT_TYPES, "activity"),
            artifacts=[Artifact.from_api_response(a) for a in artifacts] if artifacts is not None else None,
        )


__all__ = [
    "PlanStep",
    "Plan",
    "AgentMessaged",
    "UserMessaged",
    "PlanGenerated",
    "PlanApproved",
    "ProgressUpdated",
    "SessionCompleted",
    "SessionFailed",
    "ActivityEvent",
    "ACTIVITY_EVENT_TYPES",
    "GitPatch",
    "ChangeSet",
    "Media",
    "BashOutput",
    "ArtifactContent",
    "ARTIFACT_CONTENT_TYPES",
    "Artifact",
    "Activity",
]
