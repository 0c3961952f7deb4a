"""
Event Fetcher Module

This module retrieves a user's recent public events from the GitHub API
and decodes them into EventRecord objects.
"""
import logging
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from github_activity.config import GITHUB_ACCEPT_HEADER, FetcherConfig
from github_activity.exceptions import DecodeError, HTTPStatusError, TransportError
from github_activity.models import EventRecord

logger = logging.getLogger(__name__)


def decode_events(data: Any, strict_payloads: bool = True) -> List[EventRecord]:
    """
    Decode a parsed JSON body into event records, keeping server order.

    Raises DecodeError if the body is not an array or an element does not
    have the event shape.
    """
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array of events, got {type(data).__name__}")

    events = []
    for index, item in enumerate(data):
        try:
            events.append(
                EventRecord.model_validate(item, context={"strict_payloads": strict_payloads})
            )
        except ValidationError as e:
            raise DecodeError(f"event {index} is malformed: {e}") from e
    return events


class EventFetcher:
    """
    Fetches the public events of a GitHub user with a single GET request.
    """

    def __init__(self, settings: Optional[FetcherConfig] = None):
        self.settings = settings or FetcherConfig()
        self.base_url = self.settings.base_url.rstrip("/")
        # Only a session created here is closed by close()
        self._owns_session = self.settings.session is None
        self.session = self.settings.session or requests.Session()
        self.headers = {
            "Accept": GITHUB_ACCEPT_HEADER,
            "User-Agent": self.settings.user_agent,
        }

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def events_url(self, username: str) -> str:
        return f"{self.base_url}/users/{username}/events"

    def fetch(self, username: str) -> List[EventRecord]:
        """
        Fetch and decode the events of `username`.

        Raises:
            ValueError: the username is empty.
            TransportError: no response was received.
            HTTPStatusError: the response status is not 200.
            DecodeError: the body is not a JSON array of events.
        """
        if not username or not username.strip():
            raise ValueError("username must be a non-empty string")

        url = self.events_url(username)
        logger.info(f"Fetching events from {url}")
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.settings.timeout)
        except requests.RequestException as e:
            raise TransportError(f"request to {url} failed: {e}", url=url) from e

        if response.status_code != 200:
            logger.debug(f"Response: {response.text}")
            raise HTTPStatusError(response.status_code, response.reason, url=url)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"error decoding response: {e}") from e

        events = decode_events(data, strict_payloads=self.settings.strict_payloads)
        logger.info(f"Decoded {len(events)} events for {username}")
        return events
