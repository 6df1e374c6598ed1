"""
Extractor engine — picks the registered extractor for a URL's domain and runs it.

Usage:
    engine = ExtractorEngine()
    results = await engine.extract(url, Options(cookie=""))
    for r in results:
        print(r.to_dict())
    await engine.close()
"""
from __future__ import annotations
import logging
from urllib.parse import urlparse

from .base import ExtractResult, Options
from .errors import UnsupportedSite
from .fetcher import Fetcher

log = logging.getLogger("siphon.extractors")


# ──────────────────────────────
#  Extractor registry
# ──────────────────────────────
class _Extractor:
    id: str
    name: str
    domains: list[str]              # registrable domains, e.g. ["ixigua.com"]

    async def extract(self, url: str, options: Options, fetcher: Fetcher) -> list[ExtractResult]:
        raise NotImplementedError


# Global registry — populated when extractor modules are imported
_EXTRACTORS: dict[str, _Extractor] = {}


def register_extractor(extractor):
    """Decorator to register an extractor class."""
    inst = extractor()
    _EXTRACTORS[inst.id] = inst
    return extractor


def find_extractor(url: str) -> _Extractor:
    host = (urlparse(url).hostname or "").lower()
    for inst in _EXTRACTORS.values():
        for domain in inst.domains:
            if host == domain or host.endswith("." + domain):
                return inst
    raise UnsupportedSite(f"No extractor for {url!r}")


# ──────────────────────────────
#  Engine
# ──────────────────────────────
class ExtractorEngine:
    def __init__(self, *, fetcher: Fetcher | None = None, timeout: int | None = None):
        self.fetcher = fetcher or Fetcher(timeout=timeout)

    async def close(self):
        await self.fetcher.close()

    def list_extractors(self):
        return [{'id': e.id, 'name': e.name, 'domains': list(e.domains)}
                for e in _EXTRACTORS.values()]

    async def extract(self, url: str, options: Options | None = None) -> list[ExtractResult]:
        extractor = find_extractor(url)
        log.info(f"[{extractor.id}] Extracting {url}")
        results = await extractor.extract(url, options or Options(), self.fetcher)
        for r in results:
            log.info(f"[{extractor.id}] {r.title!r}: {len(r.streams)} stream(s)")
        return results


# ──────────────────────────────
#  Import all extractors to register them
# ──────────────────────────────
def _load_extractors():
    from .extractors import ixigua      # noqa: F401

_load_extractors()
