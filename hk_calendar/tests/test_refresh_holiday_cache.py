"""
Tests for scripts/refresh_holiday_cache.py
"""
import asyncio
import importlib.util
import json
from pathlib import Path

import httpx
import pytest

from conftest import make_feed

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "refresh_holiday_cache.py"

EN_URL = "https://feeds.test/common/ical/en.json"
ZH_URL = "https://feeds.test/common/ical/tc.json"

EN_FEED = make_feed(("20250201", "Spring Festival"))
ZH_FEED = make_feed(("20250201", "春節"))
OLD_CACHE = make_feed(("20240101", "The first day of January"))


def load_script():
    spec = importlib.util.spec_from_file_location("refresh_holiday_cache", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def script():
    return load_script()


@pytest.fixture
def cache_paths(tmp_path):
    en_path = tmp_path / "holidays-en.json"
    zh_path = tmp_path / "holidays-zh.json"
    for path in (en_path, zh_path):
        path.write_text(json.dumps(OLD_CACHE), encoding="utf-8")
    return en_path, zh_path


def feed_transport(zh_status=200, zh_body=None):
    def handler(request):
        if str(request.url) == EN_URL:
            return httpx.Response(200, json=EN_FEED)
        if zh_status != 200:
            return httpx.Response(zh_status, text="service unavailable")
        return httpx.Response(200, json=ZH_FEED if zh_body is None else zh_body)

    return httpx.MockTransport(handler)


def cli_args(en_path, zh_path):
    return [
        "--en-url", EN_URL,
        "--zh-url", ZH_URL,
        "--en-path", str(en_path),
        "--zh-path", str(zh_path),
        "--timeout", "5",
    ]


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_both_feeds_written(script, cache_paths):
    en_path, zh_path = cache_paths

    code = script.main(cli_args(en_path, zh_path), transport=feed_transport())

    assert code == 0
    assert read_json(en_path) == EN_FEED
    assert read_json(zh_path) == ZH_FEED
    assert "春節" in zh_path.read_text(encoding="utf-8")
    assert sorted(p.name for p in en_path.parent.iterdir()) == ["holidays-en.json", "holidays-zh.json"]


def test_missing_cache_directory_is_created(script, tmp_path):
    en_path = tmp_path / "data" / "holidays-en.json"
    zh_path = tmp_path / "data" / "holidays-zh.json"

    code = script.main(cli_args(en_path, zh_path), transport=feed_transport())

    assert code == 0
    assert read_json(en_path) == EN_FEED
    assert read_json(zh_path) == ZH_FEED


def test_one_feed_unavailable_leaves_cache_unchanged(script, cache_paths):
    en_path, zh_path = cache_paths

    code = script.main(cli_args(en_path, zh_path), transport=feed_transport(zh_status=503))

    assert code == 1
    assert read_json(en_path) == OLD_CACHE
    assert read_json(zh_path) == OLD_CACHE


def test_non_object_document_leaves_cache_unchanged(script, cache_paths):
    en_path, zh_path = cache_paths

    code = script.main(cli_args(en_path, zh_path), transport=feed_transport(zh_body=["not", "a", "feed"]))

    assert code == 1
    assert read_json(en_path) == OLD_CACHE
    assert read_json(zh_path) == OLD_CACHE


def test_failed_write_leaves_both_files_unchanged(script, cache_paths, monkeypatch):
    en_path, zh_path = cache_paths
    real_write_json = script.write_json

    def write_json(path, document):
        if path.name.startswith(zh_path.name):
            raise OSError("No space left on device")
        real_write_json(path, document)

    monkeypatch.setattr(script, "write_json", write_json)

    code = script.main(cli_args(en_path, zh_path), transport=feed_transport())

    assert code == 1
    assert read_json(en_path) == OLD_CACHE
    assert read_json(zh_path) == OLD_CACHE
    assert not list(en_path.parent.glob("*.tmp"))


def test_download_returns_both_documents(script):
    args = script.create_arg_parser().parse_args(cli_args("en.json", "zh.json"))

    english_doc, local_doc = asyncio.run(script.download(args, transport=feed_transport()))

    assert english_doc == EN_FEED
    assert local_doc == ZH_FEED


def test_download_raises_on_unavailable_feed(script):
    from hk_calendar.core.errors import FeedUnavailableError

    args = script.create_arg_parser().parse_args(cli_args("en.json", "zh.json"))

    with pytest.raises(FeedUnavailableError, match="HTTP 503"):
        asyncio.run(script.download(args, transport=feed_transport(zh_status=503)))
