import asyncio

import httpx
import pytest

from pagecarbon.services.prober import PROBE_FAILED, ProbeResult, parse_content_length, probe_size

URL = "https://ex.com/app.js"


def _probe(web, url=URL):
    async def go():
        async with web.client() as client:
            return await probe_size(client, url)
    return asyncio.run(go())


def test_head_content_length_is_trusted(web):
    web.add("HEAD", URL, httpx.Response(200, headers={"Content-Length": "4096"}))
    assert _probe(web) == ProbeResult(success=True, bytes=4096)
    assert web.methods_for(URL) == ["HEAD"]


def test_missing_content_length_falls_back_to_get(web):
    web.add("HEAD", URL, httpx.Response(200))
    web.add("GET", URL, httpx.Response(200, content=b"x" * 1234))
    assert _probe(web) == ProbeResult(success=True, bytes=1234)
    assert web.methods_for(URL) == ["HEAD", "GET"]


def test_rejected_head_falls_back_to_get(web):
    web.add("HEAD", URL, httpx.Response(405))
    web.add("GET", URL, httpx.Response(200, content=b"y" * 10))
    assert _probe(web).bytes == 10


def test_unparseable_content_length_falls_back_to_get(web):
    web.add("HEAD", URL, httpx.Response(200, headers={"Content-Length": "lots"}))
    web.add("GET", URL, httpx.Response(200, content=b"z" * 77))
    assert _probe(web).bytes == 77


def test_get_counts_received_bytes_not_header(web):
    web.add("HEAD", URL, httpx.Response(403))
    web.add(
        "GET",
        URL,
        httpx.Response(200, headers={"Content-Length": "999999"}, stream=httpx.ByteStream(b"a" * 300)),
    )
    assert _probe(web).bytes == 300


def test_head_follows_redirects(web):
    moved = "https://cdn.ex.com/app.js"
    web.add("HEAD", URL, httpx.Response(301, headers={"Location": moved}))
    web.add("HEAD", moved, httpx.Response(200, headers={"Content-Length": "512"}))
    assert _probe(web).bytes == 512


def test_get_follows_redirects(web):
    moved = "https://cdn.ex.com/app.js"
    web.add("HEAD", URL, httpx.Response(405))
    web.add("GET", URL, httpx.Response(302, headers={"Location": moved}))
    web.add("GET", moved, httpx.Response(200, content=b"q" * 64))
    assert _probe(web).bytes == 64


def test_failed_get_returns_zero(web):
    web.add("HEAD", URL, httpx.Response(500))
    web.add("GET", URL, httpx.Response(500, content=b"error page"))
    assert _probe(web) == PROBE_FAILED


def test_timeouts_never_raise(web):
    web.add("HEAD", URL, exc=httpx.ReadTimeout("timed out"))
    web.add("GET", URL, exc=httpx.ConnectError("connection refused"))
    result = _probe(web)
    assert result == ProbeResult(success=False, bytes=0)


def test_head_network_error_then_get_success(web):
    web.add("HEAD", URL, exc=httpx.ConnectError("reset"))
    web.add("GET", URL, httpx.Response(200, content=b"ok"))
    assert _probe(web) == ProbeResult(success=True, bytes=2)


def test_empty_asset_reports_zero_bytes_successfully(web):
    web.add("HEAD", URL, httpx.Response(200, headers={"Content-Length": "0"}))
    assert _probe(web) == ProbeResult(success=True, bytes=0)


@pytest.mark.parametrize(
    "value,expected",
    [("10", 10), (" 42 ", 42), ("0", 0), ("-1", None), ("", None), ("1.5", None), (None, None)],
)
def test_parse_content_length(value, expected):
    assert parse_content_length(value) == expected
