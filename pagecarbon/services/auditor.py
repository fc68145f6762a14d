"""
PageCarbon — Audit Orchestrator
Fetches a page, discovers its assets, sizes them and totals the result.

Stages run strictly in order:
    validate -> fetch page -> extract -> resolve + dedupe -> probe all -> aggregate
Only an invalid URL or a failed page fetch aborts the audit; assets that
cannot be sized are kept with a 0-byte size.
"""

import logging
import time
from functools import partial
from typing import List, Optional, Tuple

import httpx

from pagecarbon.core.errors import (
    AuditError,
    InputValidationError,
    InternalAuditError,
    PageFetchError,
)
from pagecarbon.schemas.schemas import AssetRecord, AuditResult
from pagecarbon.services.batch import DEFAULT_CONCURRENCY, run_all
from pagecarbon.services.extractor import (
    DEFAULT_MAX_IMAGES,
    AssetType,
    HtmlParser,
    dedupe_assets,
    extract_assets,
    parse_html,
)
from pagecarbon.services.prober import probe_size
from pagecarbon.services.urls import is_http_url, resolve_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20.0
DEFAULT_USER_AGENT = "PageCarbon/1.0 (Page Weight Auditor)"


async def fetch_page(client: httpx.AsyncClient, url: str) -> Tuple[bytes, str]:
    """Download the page body. Raises PageFetchError on any failure."""
    try:
        response = await client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error(f"Page fetch for {url} returned HTTP {status_code}")
        raise PageFetchError(url, f"HTTP {status_code}", status_code=status_code) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Page fetch for {url} failed: {e!r}")
        raise PageFetchError(url, str(e) or e.__class__.__name__) from e

    body = response.content
    return body, body.decode("utf-8", errors="replace")


def resolve_assets(html: str, page_url: str, max_images: int, parser: HtmlParser) -> List[Tuple[AssetType, str]]:
    """Extract references, absolutize them against the page URL and drop repeats."""
    resolved = []
    for ref in extract_assets(html, max_images=max_images, parser=parser):
        absolute = resolve_url(page_url, ref.raw_source)
        if absolute:
            resolved.append((ref.type, absolute))
    return dedupe_assets(resolved)


async def _run_audit(
    client: httpx.AsyncClient,
    page_url: str,
    concurrency_limit: int,
    max_images: int,
    parser: HtmlParser,
) -> AuditResult:
    body, html = await fetch_page(client, page_url)

    try:
        assets = resolve_assets(html, page_url, max_images, parser)
        logger.info(f"Found {len(assets)} unique assets on {page_url}")

        sizes = await run_all([url for _, url in assets], partial(probe_size, client), concurrency_limit)
        records = [
            AssetRecord(type=asset_type, url=url, bytes=size)
            for (asset_type, url), size in zip(assets, sizes)
        ]
        return AuditResult.build(page_url, len(body), records)
    except AuditError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error auditing {page_url}")
        raise InternalAuditError(f"Unexpected error auditing {page_url}: {e}") from e


async def audit_page(
    page_url: Optional[str],
    client: Optional[httpx.AsyncClient] = None,
    concurrency_limit: int = DEFAULT_CONCURRENCY,
    max_images: int = DEFAULT_MAX_IMAGES,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
    parser: HtmlParser = parse_html,
) -> AuditResult:
    """
    Audit a single page and return its asset breakdown.

    When `client` is given it is used as-is (its timeout and headers apply);
    otherwise a client is created for this audit and closed afterwards.

    Raises:
        InputValidationError: `page_url` is missing or not http(s).
        PageFetchError: the page could not be downloaded.
        InternalAuditError: anything unexpected after the page was fetched.
    """
    if not is_http_url(page_url):
        raise InputValidationError("Provide a valid http(s) URL")
    page_url = page_url.strip()

    start_time = time.time()
    logger.info(f"Auditing {page_url}")

    if client is not None:
        result = await _run_audit(client, page_url, concurrency_limit, max_images, parser)
    else:
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        ) as owned_client:
            result = await _run_audit(owned_client, page_url, concurrency_limit, max_images, parser)

    elapsed_ms = int((time.time() - start_time) * 1000)
    unknown = sum(1 for a in result.assets if a.bytes == 0)
    logger.info(
        f"Audit of {page_url} done in {elapsed_ms}ms: {result.total_bytes} bytes, "
        f"{len(result.assets)} assets ({unknown} with unknown size)"
    )
    return result
