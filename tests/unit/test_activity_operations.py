# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from jules_client.client import JulesClient
from jules_client.core.errors import DecodeError
from jules_client.data._api import _ApiClient
from jules_client.models.activity import PlanGenerated, ProgressUpdated, SessionCompleted

from fixtures.scripted_http import DummyHTTP
from fixtures.test_data import (
    SAMPLE_COMPLETED_ACTIVITY,
    SAMPLE_PLAN_ACTIVITY,
    SAMPLE_PROGRESS_ACTIVITY,
)

BASE = "https://jules.googleapis.com/v1alpha/"


@pytest.fixture
def client():
    def _make(responses):
        c = JulesClient("test-key")
        c._api = _ApiClient("test-key", BASE)
        c._api._http = DummyHTTP(responses)
        return c

    return _make


def test_get_activity(client):
    c = client([(200, SAMPLE_PLAN_ACTIVITY)])

    activity = c.activities.get("sessions/abc123/activities/a1")

    assert c._api._http.calls[0]["url"] == BASE + "sessions/abc123/activities/a1"
    assert isinstance(activity.event, PlanGenerated)


def test_list_activities_path_and_params(client):
    c = client([(200, {"activities": [SAMPLE_PLAN_ACTIVITY], "nextPageToken": "n"})])

    page = c.activities.list("sessions/abc123", page_size=20)

    call = c._api._http.calls[0]
    assert call["method"] == "get"
    assert call["url"] == BASE + "sessions/abc123/activities"
    assert call["params"] == {"pageSize": 20}
    assert page.next_page_token == "n"


def test_iter_activities_in_server_order(client):
    c = client(
        [
            (200, {"activities": [SAMPLE_PLAN_ACTIVITY, SAMPLE_PROGRESS_ACTIVITY], "nextPageToken": "t1"}),
            (200, {"activities": [SAMPLE_COMPLETED_ACTIVITY], "nextPageToken": ""}),
        ]
    )

    events = [type(a.event) for a in c.activities.iter("sessions/abc123")]

    assert events == [PlanGenerated, ProgressUpdated, SessionCompleted]
    calls = c._api._http.calls
    assert [call["url"] for call in calls] == [BASE + "sessions/abc123/activities"] * 2
    assert calls[1]["params"]["pageToken"] == "t1"


def test_activity_without_event_is_decode_error(client):
    bad = {k: v for k, v in SAMPLE_COMPLETED_ACTIVITY.items() if k != "sessionCompleted"}
    c = client([(200, bad)])

    with pytest.raises(DecodeError):
        c.activities.get("sessions/abc123/activities/a3")
