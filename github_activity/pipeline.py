"""
Activity Pipeline Module

This module wires the event fetcher to the summary renderer.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from github_activity.fetcher import EventFetcher
from github_activity.summary import SummaryRenderer, render_raw

logger = logging.getLogger(__name__)


class ActivityPipeline:
    """
    Fetches a user's events and renders them, either as a summary report
    or as raw JSON.
    """

    def __init__(
        self,
        fetcher: Optional[EventFetcher] = None,
        renderer: Optional[SummaryRenderer] = None,
    ):
        self.fetcher = fetcher or EventFetcher()
        self.renderer = renderer or SummaryRenderer()

    def run(self, username: str, raw: bool = False) -> str:
        """Run one fetch-and-render pass for `username`."""
        start_time = datetime.now(timezone.utc)
        logger.info(f"Starting activity run for {username} at {start_time}")

        events = self.fetcher.fetch(username)
        output = render_raw(events) if raw else self.renderer.render(events)

        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(f"Activity run completed in {duration:.2f} seconds")
        return output

    def get_user_events_summary(self, username: str) -> str:
        return self.run(username)
