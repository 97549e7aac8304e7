"""Centralised settings for shardsearch.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from shardsearch import __version__

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _base_url(name: str, default: str) -> str:
    return os.environ.get(name, default).rstrip("/")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP retrieval
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SHARDSEARCH_USER_AGENT", f"shardsearch/{__version__}"
        )
    )

    # ------------------------------------------------------------------
    # Catalog sites
    # ------------------------------------------------------------------
    shards_info_url: str = field(
        default_factory=lambda: _base_url("SHARDS_INFO_URL", "https://shards.info")
    )
    crystaldoc_url: str = field(
        default_factory=lambda: _base_url("CRYSTALDOC_URL", "https://www.crystaldoc.info")
    )
    github_url: str = field(
        default_factory=lambda: _base_url("GITHUB_URL", "https://github.com")
    )


# Module-level singleton, import this everywhere:
#   from shardsearch.config import settings
settings = Settings()
