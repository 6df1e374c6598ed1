"""
HTTP fetcher shared by extractors. Wraps aiohttp with a browser user agent,
timeout and optional proxy, and maps transport failures onto extractor errors.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Optional

import aiohttp

from .config import settings
from .errors import FetchFailed, ProbeFailed

log = logging.getLogger("siphon.fetcher")


class Fetcher:
    def __init__(self, *, timeout: int | None = None, proxy: str | None = None,
                 user_agent: str | None = None):
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.timeout, connect=4)
        self.proxy = (proxy if proxy is not None else settings.proxy) or None
        self.user_agent = user_agent or settings.user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        return self._session

    async def close(self):
        if self._session and not self._session.closed:
            await self._session.close()

    # ── page fetch ──────────────────

    async def get(
        self,
        url: str,
        *,
        referer: str | None = None,
        headers: dict | None = None,
    ) -> str:
        req_headers = dict(headers or {})
        if referer:
            req_headers.setdefault("Referer", referer)
        session = await self._get_session()
        try:
            async with session.get(url, headers=req_headers, proxy=self.proxy) as resp:
                resp.raise_for_status()
                return await resp.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchFailed(f"GET {url} failed: {e}") from e

    # ── size probe ──────────────────

    async def size(self, url: str, *, referer: str | None = None) -> int:
        """Byte length of a remote file, from a HEAD request's Content-Length."""
        req_headers = {"Referer": referer} if referer else {}
        session = await self._get_session()
        try:
            async with session.head(
                url,
                headers=req_headers,
                allow_redirects=True,
                proxy=self.proxy,
            ) as resp:
                resp.raise_for_status()
                length = resp.headers.get("Content-Length")
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise ProbeFailed(f"HEAD {url} failed: {e}") from e

        if length is None or not length.isdigit():
            raise ProbeFailed(f"HEAD {url}: no usable Content-Length ({length!r})")
        log.debug(f"{url} is {length} bytes")
        return int(length)
