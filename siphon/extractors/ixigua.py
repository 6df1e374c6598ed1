"""
Ixigua — window._SSR_HYDRATED_DATA → base64 main_url → direct MP4 (+ MP3 for DASH).

Single works carry a 120fps dynamic ladder with separate video and audio
tracks; when present it replaces the four-slot normal ladder entirely.
Album episodes only carry the normal ladder.
"""
from __future__ import annotations
import base64
import binascii
import logging
import re

from ..base import ExtractResult, Options, Part, Stream
from ..config import settings
from ..errors import ParseFailed, ProbeFailed
from ..fetcher import Fetcher
from ..runner import register_extractor
from .ixigua_state import EpisodeState, NormalLadder, PageState, Shape, SingleWorkState, decode_state

log = logging.getLogger("siphon.extractors.ixigua")

SITE = "西瓜视频 ixigua.com"
REFERER = "https://www.ixigua.com"
STATE_RE = re.compile(r'window\._SSR_HYDRATED_DATA=(.*?)</script>', re.DOTALL)
EPISODE_MARKER = '"albumId"'


def locate_state(html: str) -> str:
    m = STATE_RE.search(html)
    if not m or not m.group(1):
        raise ParseFailed("Ixigua: _SSR_HYDRATED_DATA not found")
    return m.group(1)


def sanitize_json(raw: str) -> str:
    """The page emits bare `undefined` values; quote them so json can parse."""
    return raw.replace(":undefined", ':"undefined"')


def detect_shape(html: str) -> Shape:
    return "episode" if EPISODE_MARKER in html else "single_work"


def decode_url(encoded: str) -> str:
    """Base64 main_url → URL. Undecodable input becomes "" and is skipped later."""
    if not encoded:
        return ""
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as e:
        log.debug(f"Could not base64-decode {encoded[:32]!r}: {e}")
        return ""


async def _part(url: str, ext: str, fetcher: Fetcher) -> Part:
    size = await fetcher.size(url, referer=REFERER)
    return Part(url=url, size=size, ext=ext)


async def resolve_normal_ladder(ladder: NormalLadder, fetcher: Fetcher, *, ext: str = "mp4") -> dict[str, Stream]:
    streams: dict[str, Stream] = {}
    for video in ladder.slots:
        if not video.main_url:
            continue
        url = decode_url(video.main_url)
        if not url:
            log.warning(f"Ixigua: skipping {video.definition}, main_url did not decode")
            continue
        part = await _part(url, "mp4", fetcher)
        streams[video.definition] = Stream(
            id=video.definition,
            quality=video.definition,
            parts=(part,),
            ext=ext,
        )
    return streams


async def resolve_single_work(state: SingleWorkState, fetcher: Fetcher) -> dict[str, Stream]:
    dynamic = state.resource.dynamic
    if not dynamic.dynamic_audio_list:
        return await resolve_normal_ladder(state.resource.normal_ladder, fetcher)

    # Last audio entry is taken as the best one; there is no bitrate field to compare.
    audio_url = decode_url(dynamic.dynamic_audio_list[-1].main_url)
    if not audio_url:
        raise ProbeFailed("Ixigua: audio track URL is empty or undecodable")
    audio = await _part(audio_url, "mp3", fetcher)

    streams: dict[str, Stream] = {}
    for video in dynamic.dynamic_video_list:
        if not video.main_url:
            continue
        url = decode_url(video.main_url)
        if not url:
            log.warning(f"Ixigua: skipping {video.definition}, main_url did not decode")
            continue
        part = await _part(url, "mp4", fetcher)
        streams[video.definition] = Stream(
            id=video.definition,
            quality=video.definition,
            parts=(part, audio),
            ext="mp4",
            need_mux=True,
        )
    return streams


async def resolve_episode(state: EpisodeState, fetcher: Fetcher) -> dict[str, Stream]:
    return await resolve_normal_ladder(state.resource.normal_ladder, fetcher, ext="")


@register_extractor
class Ixigua:
    id = "ixigua"
    name = "Ixigua"
    domains = ["ixigua.com"]

    def __init__(self, default_cookie: str | None = None):
        self.default_cookie = settings.ixigua_cookie if default_cookie is None else default_cookie

    def cookie(self, options: Options) -> str:
        return options.cookie or self.default_cookie

    async def extract(self, url: str, options: Options, fetcher: Fetcher) -> list[ExtractResult]:
        headers = {}
        cookie = self.cookie(options)
        if cookie:
            headers["Cookie"] = cookie
        else:
            log.debug("Ixigua: no cookie configured, requesting page without one")

        html = await fetcher.get(url, referer=REFERER, headers=headers)
        text = sanitize_json(locate_state(html))
        state: PageState = decode_state(text, detect_shape(html))

        if isinstance(state, EpisodeState):
            streams = await resolve_episode(state, fetcher)
        else:
            streams = await resolve_single_work(state, fetcher)

        return [ExtractResult(site=SITE, title=state.title, streams=streams, url=url)]
