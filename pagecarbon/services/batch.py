"""
PageCarbon — Batch Runner
Sizes many assets concurrently without exceeding a fixed number of
in-flight requests.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Sequence

from pagecarbon.services.prober import ProbeResult

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 6

Probe = Callable[[str], Awaitable[ProbeResult]]


async def run_all(
    urls: Sequence[str],
    probe: Probe,
    concurrency_limit: int = DEFAULT_CONCURRENCY,
) -> List[int]:
    """
    Probe every URL and return byte counts aligned with `urls`.

    At most `concurrency_limit` probes run at once. Completion order is
    arbitrary but result[i] always belongs to urls[i]. A probe that raises
    is recorded as 0 so the rest of the batch still completes.
    """
    if concurrency_limit < 1:
        raise ValueError(f"concurrency_limit must be >= 1, got {concurrency_limit}")

    semaphore = asyncio.Semaphore(concurrency_limit)

    async def _limited(url: str) -> int:
        async with semaphore:
            try:
                result = await probe(url)
            except Exception as e:
                logger.warning(f"Probe for {url} raised, recording 0 bytes: {e!r}")
                return 0
        return max(0, result.bytes)

    return list(await asyncio.gather(*(_limited(url) for url in urls)))
