"""
Core types for the siphon extractor system.

An extraction returns one ExtractResult per page. Each result maps a quality
label to a Stream; a Stream is one or more Parts that the downloader fetches
and, when need_mux is set, multiplexes into a single container.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# ──────────────────────────────
#  Stream definitions
# ──────────────────────────────
@dataclass(frozen=True)
class Part:
    url: str
    size: int                         # bytes, from the size probe
    ext: str = ""                     # "mp4" | "mp3" | "" (unknown)

    def to_dict(self):
        return {"url": self.url, "size": self.size, "ext": self.ext}

@dataclass(frozen=True)
class Stream:
    id: str
    quality: str
    parts: tuple[Part, ...] = ()
    ext: str = ""                     # container extension, "" = caller infers
    need_mux: bool = False

    @property
    def size(self) -> int:
        return sum(p.size for p in self.parts)

    def to_dict(self):
        return {
            "id": self.id,
            "quality": self.quality,
            "parts": [p.to_dict() for p in self.parts],
            "size": self.size,
            "ext": self.ext,
            "need_mux": self.need_mux,
        }

# ──────────────────────────────
#  Extractor output
# ──────────────────────────────
@dataclass(frozen=True)
class ExtractResult:
    site: str
    title: str
    streams: Mapping[str, Stream] = field(default_factory=dict)
    url: str = ""
    media_type: str = "video"

    def __post_init__(self):
        object.__setattr__(self, "streams", MappingProxyType(dict(self.streams)))

    def to_dict(self):
        return {
            "site": self.site,
            "title": self.title,
            "type": self.media_type,
            "streams": {k: s.to_dict() for k, s in self.streams.items()},
            "url": self.url,
        }

# ──────────────────────────────
#  Per-call options (passed to extractors)
# ──────────────────────────────
@dataclass(frozen=True)
class Options:
    cookie: str = ""                  # "" → use the configured default cookie
