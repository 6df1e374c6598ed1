import asyncio

import pytest

from siphon.base import Options
from siphon.errors import UnsupportedSite
from siphon.runner import ExtractorEngine, find_extractor


class TestFindExtractor:
    @pytest.mark.parametrize("url", [
        "https://www.ixigua.com/6900000000000000000",
        "https://ixigua.com/6900000000000000000?logTag=abc",
        "https://m.IXIGUA.com/video/1",
    ])
    def test_ixigua_urls(self, url):
        assert find_extractor(url).id == "ixigua"

    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=x",
        "https://notixigua.com/1",
        "not a url",
    ])
    def test_unknown_sites_raise(self, url):
        with pytest.raises(UnsupportedSite):
            find_extractor(url)


class TestExtractorEngine:
    def test_lists_registered_extractors(self, fake_fetcher):
        engine = ExtractorEngine(fetcher=fake_fetcher())

        ids = [e["id"] for e in engine.list_extractors()]

        assert "ixigua" in ids

    def test_extract_dispatches_by_domain(self, ixigua_page, fake_fetcher):
        p = ixigua_page
        html = p.html(p.single_work(title="Engine", normal=p.normal_ladder(p.candidate("480p", "https://n/480"))))
        engine = ExtractorEngine(fetcher=fake_fetcher(html=html, sizes={"https://n/480": 48}))

        async def run():
            try:
                return await engine.extract("https://www.ixigua.com/1", Options(cookie="c=1"))
            finally:
                await engine.close()

        results = asyncio.run(run())

        assert results[0].title == "Engine"
        assert results[0].streams["480p"].size == 48
        assert engine.fetcher.requests[0]["headers"]["Cookie"] == "c=1"
