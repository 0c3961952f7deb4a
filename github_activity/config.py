"""
Configuration Module

This module contains configuration settings for the application.
"""
import os
from pathlib import Path
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
from dotenv import load_dotenv

# Base directory - one level up from this file
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env file from BASE_DIR (adjust path if your .env is elsewhere)
load_dotenv(BASE_DIR / ".env")

# GitHub API settings
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
USER_AGENT = os.getenv("USER_AGENT", "github-activity")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FetcherConfig(BaseModel):
    """
    Settings for a single EventFetcher.

    Defaults come from the environment-driven constants above. Pass a
    `session` to reuse or stub the HTTP transport.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    base_url: str = GITHUB_API_URL
    timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    user_agent: str = USER_AGENT
    # Reject known event types whose payload lacks a field its summary needs
    strict_payloads: bool = True
    session: Optional[requests.Session] = None
