"""
PageCarbon — Size Prober
Measures the transfer size of a single asset: HEAD first, GET as fallback.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of sizing one asset. `bytes` is 0 whenever `success` is False."""
    success: bool
    bytes: int = 0


PROBE_FAILED = ProbeResult(success=False, bytes=0)


def parse_content_length(value: Optional[str]) -> Optional[int]:
    """Return the Content-Length as an int, or None when absent or unusable."""
    if value is None:
        return None
    try:
        length = int(value.strip())
    except ValueError:
        return None
    return length if length >= 0 else None


async def _head_size(client: httpx.AsyncClient, url: str) -> Optional[int]:
    try:
        response = await client.head(url, follow_redirects=True)
    except Exception as e:
        logger.debug(f"HEAD {url} failed ({e!r}), falling back to GET")
        return None

    if not response.is_success:
        logger.debug(f"HEAD {url} returned {response.status_code}, falling back to GET")
        return None

    length = parse_content_length(response.headers.get("content-length"))
    if length is None:
        logger.debug(f"HEAD {url} has no usable Content-Length, falling back to GET")
    return length


async def _get_size(client: httpx.AsyncClient, url: str) -> ProbeResult:
    try:
        async with client.stream("GET", url, follow_redirects=True) as response:
            if not response.is_success:
                logger.warning(f"GET {url} returned {response.status_code}, size unknown")
                return PROBE_FAILED
            transferred = 0
            async for chunk in response.aiter_bytes():
                transferred += len(chunk)
    except Exception as e:
        logger.warning(f"GET {url} failed, size unknown: {e!r}")
        return PROBE_FAILED
    return ProbeResult(success=True, bytes=transferred)


async def probe_size(client: httpx.AsyncClient, url: str) -> ProbeResult:
    """
    Determine how many bytes `url` costs to load. Never raises.

    Request timeouts come from `client`; a timeout counts as a failure.

    A HEAD request that succeeds with a parseable Content-Length is trusted
    as-is. Otherwise the body is downloaded once and its transferred length
    is counted. A failed download yields PROBE_FAILED (zero bytes).
    """
    length = await _head_size(client, url)
    if length is not None:
        return ProbeResult(success=True, bytes=length)
    return await _get_size(client, url)
