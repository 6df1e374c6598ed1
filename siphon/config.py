"""
Runtime settings, read from the environment (and a local .env file).

    SIPHON_IXIGUA_COOKIE   default cookie for ixigua.com when none is passed
    SIPHON_USER_AGENT      browser user agent sent with page requests
    SIPHON_TIMEOUT         total HTTP timeout in seconds
    SIPHON_PROXY           optional HTTP proxy URL
    SIPHON_LOG_LEVEL       logging level for the command line
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/79.0.3945.88 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    ixigua_cookie: str = ""
    user_agent: str = DEFAULT_UA
    timeout: int = 10
    proxy: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            ixigua_cookie=os.getenv("SIPHON_IXIGUA_COOKIE") or "",
            user_agent=os.getenv("SIPHON_USER_AGENT") or DEFAULT_UA,
            timeout=int(os.getenv("SIPHON_TIMEOUT") or 10),
            proxy=os.getenv("SIPHON_PROXY") or None,
            log_level=(os.getenv("SIPHON_LOG_LEVEL") or "INFO").upper(),
        )


settings = Settings.from_env()
