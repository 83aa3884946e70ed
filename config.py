from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    api_url: str = os.getenv("SO_API_URL", "https://api.stackexchange.com/2.3")
    site: str = os.getenv("SO_SITE", "stackoverflow")
    # Per-request timeout in seconds, no retries
    timeout: float = float(os.getenv("SO_TIMEOUT", "10"))
    user_agent: str = os.getenv("SO_USER_AGENT", "so-cli/0.1")
    log_level: str = os.getenv("SO_LOG_LEVEL", "WARNING")


@dataclass(frozen=True)
class Options:
    """Flags for a single invocation, built once from the command line."""

    verbosity: int = 0
    list_results: bool = False
    answer: int = 1
    limit: int = 10


def get_settings() -> Settings:
    return Settings()
