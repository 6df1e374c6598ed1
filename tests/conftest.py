"""Pytest fixtures: a fake fetcher and builders for ixigua page markup."""

import base64
import json

import pytest

from siphon.errors import ProbeFailed


def b64(s):
    return base64.b64encode(s.encode()).decode()


class FakeFetcher:
    """Stands in for siphon.fetcher.Fetcher; sizes are looked up by decoded URL."""

    user_agent = "test-agent"

    def __init__(self, html="", sizes=None):
        self.html = html
        self.sizes = sizes or {}
        self.requests = []
        self.probed = []

    async def get(self, url, *, referer=None, headers=None):
        self.requests.append({"url": url, "referer": referer, "headers": dict(headers or {})})
        return self.html

    async def size(self, url, *, referer=None):
        self.probed.append(url)
        if url not in self.sizes:
            raise ProbeFailed(f"HEAD {url} failed: 404")
        return self.sizes[url]

    async def close(self):
        pass


def candidate(definition, url):
    return {"definition": definition, "main_url": b64(url) if url else ""}


def normal_ladder(*entries):
    return {f"video_{i}": e for i, e in enumerate(entries, start=1)}


def single_work_state(title="Work", normal=None, videos=(), audios=()):
    return {
        "anyVideo": {"gidInformation": {"packerData": {"video": {
            "title": title,
            "videoResource": {
                "normal": {"video_list": normal or {}},
                "dash_120fps": {"dynamic_video": {
                    "dynamic_video_list": list(videos),
                    "dynamic_audio_list": list(audios),
                }},
            },
        }}}}
    }


def episode_state(title="Album", name="Ep 1", normal=None):
    return {
        "anyVideo": {"gidInformation": {"packerData": {
            "albumId": "6820000000000000000",
            "episodeInfo": {"title": title, "name": name},
            "videoResource": {"normal": {"video_list": normal or {}}},
        }}}
    }


def page(state, extra=""):
    payload = state if isinstance(state, str) else json.dumps(state, ensure_ascii=False)
    return (
        "<html><head><script>var a=1;</script>"
        f"<script>window._SSR_HYDRATED_DATA={payload}</script>"
        f"{extra}</head><body></body></html>"
    )


@pytest.fixture
def ixigua_page():
    """Helpers for building pages: ixigua_page.single_work(...), .episode(...), .html(...)."""
    class _Builder:
        b64 = staticmethod(b64)
        candidate = staticmethod(candidate)
        normal_ladder = staticmethod(normal_ladder)
        single_work = staticmethod(single_work_state)
        episode = staticmethod(episode_state)
        html = staticmethod(page)
    return _Builder


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
