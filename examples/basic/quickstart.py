# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Jules Client - Quickstart

Walks through the main operations against a real account:

1. List connected sources
2. Create a session on the first source
3. Follow its activities
4. Approve the plan, send a follow-up message and optionally delete it

Prerequisites:
- ``pip install -e .`` from the repository root
- An API key from the Jules settings page, in ``JULES_API_KEY`` or entered when prompted

Usage:
    python examples/basic/quickstart.py
"""

import logging
import os
import sys

from jules_client import JulesClient
from jules_client.core.config import JulesConfig
from jules_client.core.errors import ApiError, JulesError
from jules_client.core.telemetry import TelemetryConfig
from jules_client.models.session import Session, SessionState, SourceContext


def log_call(call: str) -> None:
    print({"call": call})


def main() -> None:
    api_key = os.environ.get("JULES_API_KEY") or input("Enter Jules API key: ").strip()
    if not api_key:
        print("No API key entered; exiting.")
        sys.exit(1)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = JulesConfig(http_timeout=30, telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG"))

    with JulesClient(api_key, config=config) as client:
        log_call("client.sources.iter()")
        sources = list(client.sources.iter())
        for source in sources:
            repo = source.github_repo
            print({"source": source.name, "repo": f"{repo.owner}/{repo.repo}" if repo else None})
        if not sources:
            print("No sources connected; connect a repository in the Jules web app first.")
            return

        session = Session(
            prompt=input("Task for the agent: ").strip() or "Add a README badge for the test workflow",
            source_context=SourceContext(source=sources[0].name),
            require_plan_approval=True,
        )
        log_call("client.sessions.create(session)")
        created = client.sessions.create(session)
        print({"session": created.name, "state": created.state, "url": created.url})

        log_call(f"client.activities.iter({created.name!r})")
        for activity in client.activities.iter(created.name):
            print({"activity": activity.id, "originator": activity.originator, "event": type(activity.event).__name__})

        current = client.sessions.get(created.name)
        if current.state is SessionState.AWAITING_PLAN_APPROVAL:
            log_call("client.sessions.approve_plan(...)")
            client.sessions.approve_plan(created.name)

        try:
            log_call("client.sessions.send_message(...)")
            client.sessions.send_message(created.name, "Please keep the change small.")
        except ApiError as e:
            print(f"Message rejected (status {e.status_code}): {e.message}")

        if (input(f"Delete {created.name}? (y/N): ").strip() or "n").lower() in ("y", "yes"):
            log_call("client.sessions.delete(...)")
            client.sessions.delete(created.name)


if __name__ == "__main__":
    try:
        main()
    except JulesError as e:
        print(f"Request failed: {e.to_dict()}")
        sys.exit(1)
