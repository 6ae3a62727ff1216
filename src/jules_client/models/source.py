# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Source records: repositories connected to Jules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ._wire import _drop_none, _expect_object, _require, _require_str


@dataclass
class GitHubBranch:
    """A branch of a GitHub repository."""

    display_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"displayName": self.display_name}

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "GitHubBranch":
        data = _expect_object(response_data, "branch")
        return cls(display_name=_require_str(data, "displayName"))


@dataclass
class GitHubRepo:
    """
    A GitHub repository.

    :param owner: User or organization owning the repository.
    :type owner: str
    :param repo: Repository name.
    :type repo: str
    :param is_private: Whether the repository is private.
    :type is_private: bool
    :param default_branch: The default branch.
    :type default_branch: GitHubBranch
    :param branches: Available branches.
    :type branches: list[GitHubBranch]
    """

    owner: str
    repo: str
    default_branch: GitHubBranch
    is_private: bool = False
    branches: List[GitHubBranch] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "repo": self.repo,
            "isPrivate": self.is_private,
            "defaultBranch": self.default_branch.to_dict(),
            "branches": [b.to_dict() for b in self.branches],
        }

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "GitHubRepo":
        data = _expect_object(response_data, "githubRepo")
        is_private = data.get("isPrivate", False)
        if not isinstance(is_private, bool):
            raise TypeError("'isPrivate' must be a boolean")
        branches = data.get("branches") or []
        if not isinstance(branches, list):
            raise TypeError("'branches' must be a list")
        return cls(
            owner=_require_str(data, "owner"),
            repo=_require_str(data, "repo"),
            is_private=is_private,
            default_branch=GitHubBranch.from_api_response(_require(data, "defaultBranch")),
            branches=[GitHubBranch.from_api_response(b) for b in branches],
        )


@dataclass
class Source:
    """
    A source repository available to sessions.

    :param name: Resource name, e.g. ``"sources/github/octo/app"``.
    :type name: str
    :param id: Source ID.
    :type id: str
    :param github_repo: GitHub details, when the source is a GitHub repository.
    :type github_repo: GitHubRepo | None
    """

    name: str
    id: str
    github_repo: Optional[GitHubRepo] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "name": self.name,
                "id": self.id,
                "githubRepo": self.github_repo.to_dict() if self.github_repo else None,
            }
        )

    @classmethod
    def from_api_response(cls, response_data: Dict[str, Any]) -> "Source":
        data = _expect_object(response_data, "source")
        repo = data.get("githubRepo")
        return cls(
            name=_require_str(data, "name"),
            id=_require_str(data, "id"),
            github_repo=GitHubRepo.from_api_response(repo) if repo is not None else None,
        )


__all__ = ["GitHubBranch", "GitHubRepo", "Source"]
