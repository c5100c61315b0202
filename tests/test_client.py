"""Tests for the requests-based API client using a mocked session."""

import json
from unittest import mock

import requests

from exercise_tracker_client import ExerciseTrackerAPI


def make_response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://tracker.test/api"
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


def make_api(*responses):
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return ExerciseTrackerAPI(base_url="http://tracker.test/", session=session), session


def test_create_user_posts_form():
    api, session = make_api(make_response(201, {"id": "abc", "username": "alice"}))
    data, error = api.create_user("alice")
    assert error is None
    assert data == {"id": "abc", "username": "alice"}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://tracker.test/api/users"
    assert kwargs["data"] == {"username": "alice"}


def test_list_users():
    api, _ = make_api(make_response(200, [{"id": "abc", "username": "alice"}]))
    users, error = api.list_users()
    assert error is None
    assert users == [{"id": "abc", "username": "alice"}]


def test_add_exercise_sends_optional_date():
    api, session = make_api(make_response(201, {}), make_response(201, {}))
    api.add_exercise("abc", "run", 30)
    assert session.request.call_args.kwargs["data"] == {"description": "run", "duration": "30"}
    api.add_exercise("abc", "run", 30, date="2020-01-01")
    assert session.request.call_args.kwargs["data"]["date"] == "2020-01-01"
    assert session.request.call_args.kwargs["url"] == "http://tracker.test/api/users/abc/exercises"


def test_get_log_maps_query_parameters():
    payload = {"username": "alice", "count": 0, "id": "abc", "log": []}
    api, session = make_api(make_response(200, payload))
    data, error = api.get_log("abc", date_from="2020-01-01", date_to="2020-01-31", limit=5)
    assert error is None
    assert data == payload
    assert session.request.call_args.kwargs["params"] == {
        "from": "2020-01-01",
        "to": "2020-01-31",
        "limit": 5,
    }


def test_http_error_is_returned_not_raised():
    api, _ = make_api(make_response(404, {"detail": "could not find user"}))
    data, error = api.get_log("missing")
    assert data is None
    assert error == {"status_code": 404, "message": "could not find user"}


def test_transport_error_is_returned_not_raised():
    api, _ = make_api(requests.ConnectionError("connection refused"))
    users, error = api.list_users()
    assert users == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
