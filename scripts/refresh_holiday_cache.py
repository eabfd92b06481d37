"""
Download the 1823 public holiday feeds into the local cache used when HOLIDAY_SOURCE=local.
Both feeds are fetched concurrently; if either fails, neither cache file is touched.

Usage:
  python scripts/refresh_holiday_cache.py
  python scripts/refresh_holiday_cache.py --en-path data/holidays-en.json --zh-path data/holidays-zh.json
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from hk_calendar.core.config import settings
from hk_calendar.core.errors import FeedUnavailableError
from hk_calendar.core.logging import setup_logging
from hk_calendar.services.feed_sources import HttpFeedSource, parse_feed
from hk_calendar.utils.datetime_utils import extract_date_key

logger = logging.getLogger("refresh_holiday_cache")


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refresh_holiday_cache", description="Refresh the cached Hong Kong public holiday feeds"
    )
    parser.add_argument("--en-url", default=settings.HOLIDAY_FEED_EN_URL)
    parser.add_argument("--zh-url", default=settings.HOLIDAY_FEED_ZH_URL)
    parser.add_argument("--en-path", default=settings.HOLIDAY_CACHE_EN_PATH)
    parser.add_argument("--zh-path", default=settings.HOLIDAY_CACHE_ZH_PATH)
    parser.add_argument("--timeout", type=float, default=settings.HOLIDAY_FETCH_TIMEOUT)
    return parser


async def download(args: argparse.Namespace, transport: httpx.AsyncBaseTransport = None):
    english = HttpFeedSource(args.en_url, timeout=args.timeout, transport=transport)
    local = HttpFeedSource(args.zh_url, timeout=args.timeout, transport=transport)
    english_doc, local_doc = await asyncio.gather(english.load(), local.load())
    # Reject documents that are not feed objects before overwriting a good cache
    for name, doc in ((args.en_url, english_doc), (args.zh_url, local_doc)):
        feed = parse_feed(name, doc)
        dated = sum(1 for event in feed.events if extract_date_key(event.dtstart))
        logger.info("%s: %d events with a usable date", name, dated)
    return english_doc, local_doc


def write_json(path: Path, document) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False)


def write_caches(documents: List[Tuple[str, Any]]) -> None:
    """
    Write every (path, document) pair, or none of them

    Each document goes to a sibling ".tmp" file first; the targets are only
    replaced once all temp files are written.
    """
    staged = []
    try:
        for path, document in documents:
            target = Path(path)
            tmp = target.with_name(target.name + ".tmp")
            staged.append((tmp, target))
            write_json(tmp, document)
    except (OSError, TypeError, ValueError):
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    for tmp, target in staged:
        tmp.replace(target)
        logger.info("Wrote %s", target)


def main(argv: Optional[List[str]] = None, transport: httpx.AsyncBaseTransport = None) -> int:
    setup_logging()
    args = create_arg_parser().parse_args(argv)

    try:
        english_doc, local_doc = asyncio.run(download(args, transport=transport))
    except FeedUnavailableError as e:
        logger.error("Holiday feed download failed, cache left unchanged: %s", e)
        return 1

    try:
        write_caches([(args.en_path, english_doc), (args.zh_path, local_doc)])
    except (OSError, TypeError, ValueError) as e:
        logger.error("Writing the holiday cache failed, cache left unchanged: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
