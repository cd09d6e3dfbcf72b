"""Settings for the job posting builder.

Records never read the environment themselves; callers pass a `Settings`
instance in, built either directly or with `Settings.from_env()`.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel


def _parse_bool(env_name: str, default: bool) -> bool:
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


class Settings(BaseModel):
    default_country: str = "US"
    default_language: str = "en"
    include_unset: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            default_country=os.getenv("JOB_POSTING_DEFAULT_COUNTRY") or "US",
            default_language=os.getenv("JOB_POSTING_DEFAULT_LANGUAGE") or "en",
            include_unset=_parse_bool("JOB_POSTING_INCLUDE_UNSET", True),
        )
