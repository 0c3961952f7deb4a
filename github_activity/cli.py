"""
Command-line entry point: print a GitHub user's recent activity.
"""
import argparse
import logging
import math
import sys
from typing import List, Optional

from github_activity import config
from github_activity.config import FetcherConfig
from github_activity.exceptions import GitHubActivityError
from github_activity.fetcher import EventFetcher
from github_activity.pipeline import ActivityPipeline
from github_activity.summary import SummaryRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Show the recent public activity of a GitHub user.",
    )
    parser.add_argument("username", help="GitHub username to look up.")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the decoded events as JSON instead of a summary.",
    )
    parser.add_argument(
        "--base-url",
        default=config.GITHUB_API_URL,
        help="GitHub API base URL (default: %(default)s).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.REQUEST_TIMEOUT_SECONDS,
        help="Request timeout in seconds (default: %(default)s).",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Leave out events whose payload lacks the fields their summary needs.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.username.strip():
        parser.error("Please provide a GitHub username")
    if not math.isfinite(args.timeout) or args.timeout <= 0:
        parser.error("--timeout must be a positive number")

    log_level = logging.getLevelName(config.LOG_LEVEL.upper())
    known_level = isinstance(log_level, int)
    logging.basicConfig(
        level=logging.INFO if args.verbose else (log_level if known_level else logging.WARNING),
        format=config.LOG_FORMAT,
    )
    if not known_level:
        logger.warning(f"Unknown LOG_LEVEL {config.LOG_LEVEL!r}, using WARNING")

    settings = FetcherConfig(
        base_url=args.base_url,
        timeout=args.timeout,
        strict_payloads=not args.skip_invalid,
    )

    with EventFetcher(settings) as fetcher:
        pipeline = ActivityPipeline(
            fetcher=fetcher,
            renderer=SummaryRenderer(skip_invalid=args.skip_invalid),
        )
        try:
            output = pipeline.run(args.username, raw=args.raw)
        except GitHubActivityError as e:
            logger.error(f"Unable to get user activity for {args.username!r}: {e}")
            return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
