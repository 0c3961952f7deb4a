from github_activity.exceptions import (
    DecodeError,
    GitHubActivityError,
    HTTPStatusError,
    RenderError,
    TransportError,
)


def test_http_status_error_carries_status_line():
    err = HTTPStatusError(404, "Not Found", url="https://api.github.com/users/x/events")
    assert err.status == "404 Not Found"
    assert str(err) == "non-OK status code: 404 Not Found"
    assert err.url.endswith("/users/x/events")


def test_http_status_error_without_reason():
    err = HTTPStatusError(502)
    assert err.status == "502"


def test_render_error_names_event():
    err = RenderError("ForkEvent", "u/r", "payload was not decoded for this event type")
    assert err.event_type == "ForkEvent"
    assert err.repo_name == "u/r"
    assert "ForkEvent in u/r" in str(err)


def test_all_errors_share_base():
    for err in (
        TransportError("boom"),
        HTTPStatusError(500, "Internal Server Error"),
        DecodeError("bad body"),
        RenderError("PushEvent", "u/r", "missing commits"),
    ):
        assert isinstance(err, GitHubActivityError)
        assert err.message == str(err)
