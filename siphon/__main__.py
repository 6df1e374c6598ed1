import argparse
import asyncio
import json
import logging
import sys

from .base import Options
from .config import settings
from .errors import ExtractorError
from .runner import ExtractorEngine


async def run(url: str, cookie: str, as_json: bool):
    engine = ExtractorEngine()
    try:
        results = await engine.extract(url, Options(cookie=cookie))
    finally:
        await engine.close()

    if as_json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return

    for r in results:
        print(f"Site:  {r.site}")
        print(f"Title: {r.title}")
        print(f"Type:  {r.media_type}")
        for quality, stream in r.streams.items():
            mux = " (mux)" if stream.need_mux else ""
            print(f"  [{quality}] {stream.size / 1048576:.2f} MiB, {len(stream.parts)} part(s){mux}")


def main():
    parser = argparse.ArgumentParser(prog="siphon", description="Extract direct stream URLs from a video page")
    parser.add_argument("url", help="Page URL")
    parser.add_argument("--cookie", default="", help="Cookie header (default: SIPHON_IXIGUA_COOKIE)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(run(args.url, args.cookie, args.json))
    except ExtractorError as e:
        print(f"Extraction failed: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
