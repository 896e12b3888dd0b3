"""Environment driven settings."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from liberica_locator.constants import GITHUB_API_BASE

DEFAULT_PER_PAGE = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Locator settings"""
    github_token: Optional[str] = None
    api_base: str = GITHUB_API_BASE
    per_page: int = DEFAULT_PER_PAGE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Recognised variables: GITHUB_TOKEN, GITHUB_API_URL,
        LIBERICA_LOCATOR_PER_PAGE and LIBERICA_LOCATOR_LOG_LEVEL.
        """
        env = os.environ if environ is None else environ

        per_page = env.get("LIBERICA_LOCATOR_PER_PAGE")
        try:
            per_page_value = int(per_page) if per_page else DEFAULT_PER_PAGE
        except ValueError:
            raise ValueError(f"Invalid LIBERICA_LOCATOR_PER_PAGE: {per_page}") from None
        if per_page_value < 1:
            raise ValueError(f"Invalid LIBERICA_LOCATOR_PER_PAGE: {per_page}")

        return cls(
            github_token=env.get("GITHUB_TOKEN") or None,
            api_base=(env.get("GITHUB_API_URL") or GITHUB_API_BASE).rstrip("/"),
            per_page=per_page_value,
            log_level=(env.get("LIBERICA_LOCATOR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
