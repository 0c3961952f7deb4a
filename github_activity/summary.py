"""
Summary Module

This module turns decoded GitHub events into a plain-text report with one
line per event, or into raw JSON for the --raw output mode.
"""
import json
import logging
from typing import Callable, Dict, Iterable

from github_activity import models
from github_activity.exceptions import RenderError
from github_activity.models import EventPayload, EventRecord

logger = logging.getLogger(__name__)

HEADER = "Output:"
LINE_MARKER = "- "


def _commit_comment(event: EventRecord, details: models.CommitCommentPayload) -> str:
    return f"Commented on commit in {event.repo_name}"


def _create(event: EventRecord, details: models.CreatePayload) -> str:
    return f"Created {details.ref_type} {event.repo_name}"


def _delete(event: EventRecord, details: models.DeletePayload) -> str:
    return f"Deleted {details.ref_type} {details.ref} from {event.repo_name}"


def _fork(event: EventRecord, details: models.ForkPayload) -> str:
    return f"Forked {details.forkee.full_name} to {event.repo_name}"


def _issue_comment(event: EventRecord, details: models.IssueCommentPayload) -> str:
    return f"Comment {details.action} on issue in {event.repo_name}"


def _push(event: EventRecord, details: models.PushPayload) -> str:
    return f"Pushed {len(details.commits)} commits to {event.repo_name}"


def _pull_request(event: EventRecord, details: models.PullRequestPayload) -> str:
    action = details.action.replace("_", " ")
    return f"Pull request {action} {event.repo_name}"


SUMMARY_RULES: Dict[str, Callable[[EventRecord, EventPayload], str]] = {
    models.COMMIT_COMMENT_EVENT: _commit_comment,
    models.CREATE_EVENT: _create,
    models.DELETE_EVENT: _delete,
    models.FORK_EVENT: _fork,
    models.ISSUE_COMMENT_EVENT: _issue_comment,
    models.PUSH_EVENT: _push,
    models.PULL_REQUEST_EVENT: _pull_request,
}


def summarize_event(event: EventRecord) -> str:
    """Return the one-line summary of a single event."""
    rule = SUMMARY_RULES.get(event.type)
    if rule is None:
        return f"{json.dumps(event.type, ensure_ascii=False)} is not implemented"

    details = event.details
    if not isinstance(details, models.PAYLOAD_MODELS[event.type]):
        raise RenderError(event.type, event.repo_name, "payload was not decoded for this event type")
    return rule(event, details)


class SummaryRenderer:
    """
    Builds the text report for a sequence of events.

    With `skip_invalid` set, events that raise RenderError are logged and
    left out of the report instead of aborting it.
    """

    def __init__(self, skip_invalid: bool = False):
        self.skip_invalid = skip_invalid

    def render(self, events: Iterable[EventRecord]) -> str:
        lines = [HEADER]
        for event in events:
            try:
                summary = summarize_event(event)
            except RenderError as e:
                if not self.skip_invalid:
                    raise
                logger.warning(f"Skipping event: {e}")
                continue
            lines.append(f"{LINE_MARKER}{summary}")
        return "\n".join(lines) + "\n"


def render(events: Iterable[EventRecord], skip_invalid: bool = False) -> str:
    return SummaryRenderer(skip_invalid=skip_invalid).render(events)


def render_raw(events: Iterable[EventRecord]) -> str:
    """Dump events as a JSON array in the API's own shape."""
    return json.dumps([event.to_api() for event in events], indent=2) + "\n"
