"""
Event Models

This module defines the event records decoded from the GitHub events API,
along with the payload shape each supported event type needs.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    ValidationInfo,
    model_validator,
)

logger = logging.getLogger(__name__)

COMMIT_COMMENT_EVENT = "CommitCommentEvent"
CREATE_EVENT = "CreateEvent"
DELETE_EVENT = "DeleteEvent"
FORK_EVENT = "ForkEvent"
ISSUE_COMMENT_EVENT = "IssueCommentEvent"
PUSH_EVENT = "PushEvent"
PULL_REQUEST_EVENT = "PullRequestEvent"


class EventPayload(BaseModel):
    """Typed view of the part of an event payload a summary reads."""

    model_config = ConfigDict(frozen=True)


class CommitCommentPayload(EventPayload):
    pass


class CreatePayload(EventPayload):
    ref_type: str


class DeletePayload(EventPayload):
    ref_type: str
    ref: str


class Forkee(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str


class ForkPayload(EventPayload):
    forkee: Forkee


class IssueCommentPayload(EventPayload):
    action: str


class PushPayload(EventPayload):
    commits: List[Any]


class PullRequestPayload(EventPayload):
    action: str


PAYLOAD_MODELS: Dict[str, Type[EventPayload]] = {
    COMMIT_COMMENT_EVENT: CommitCommentPayload,
    CREATE_EVENT: CreatePayload,
    DELETE_EVENT: DeletePayload,
    FORK_EVENT: ForkPayload,
    ISSUE_COMMENT_EVENT: IssueCommentPayload,
    PUSH_EVENT: PushPayload,
    PULL_REQUEST_EVENT: PullRequestPayload,
}


def _error_fields(exc: ValidationError) -> str:
    return ", ".join(".".join(str(part) for part in err["loc"]) or "payload" for err in exc.errors())


class EventRecord(BaseModel):
    """
    One activity item returned by the GitHub events API.

    Accepts the wire shape (`repo.name`) as well as `repo_name` directly.
    For known event types the payload is checked against its model and
    kept in `details`; validate with context `{"strict_payloads": False}`
    to keep a record whose payload does not match (with `details` unset).
    """

    model_config = ConfigDict(frozen=True)

    type: str
    repo_name: str = Field(validation_alias=AliasChoices(AliasPath("repo", "name"), "repo_name"))
    payload: Dict[str, Any]
    created_at: Optional[str] = None

    _details: Optional[EventPayload] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _decode_details(self, info: ValidationInfo) -> "EventRecord":
        payload_model = PAYLOAD_MODELS.get(self.type)
        if payload_model is None:
            return self
        try:
            self._details = payload_model.model_validate(self.payload)
        except ValidationError as exc:
            fields = _error_fields(exc)
            if (info.context or {}).get("strict_payloads", True):
                raise ValueError(f"{self.type} payload is missing or has malformed fields: {fields}") from exc
            logger.warning(f"Keeping {self.type} with undecoded payload (bad fields: {fields})")
        return self

    @property
    def details(self) -> Optional[EventPayload]:
        """Typed payload for known event types, None otherwise."""
        return self._details

    def to_api(self) -> Dict[str, Any]:
        """Return the record in the shape the GitHub API sends it."""
        return {
            "type": self.type,
            "repo": {"name": self.repo_name},
            "payload": self.payload,
            "created_at": self.created_at,
        }

    def __repr__(self):
        return f"<EventRecord(type={self.type}, repo={self.repo_name})>"
