"""
PageCarbon — Suggestions
Actionable fixes derived from an audit result.
"""

from typing import List
from urllib.parse import urlsplit

import tldextract

from pagecarbon.schemas.schemas import AuditResult
from pagecarbon.services.extractor import AssetType

# Bundled public suffix snapshot only; never fetch the list over the network
_TLDX = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())


def registrable_domain(url: str) -> str:
    """Return e.g. "example.co.uk" for "https://cdn.example.co.uk/x", or ""."""
    try:
        host = urlsplit(url).hostname or ""
    except ValueError:
        return ""
    if not host:
        return ""
    ext = _TLDX(host)
    if not ext.domain or not ext.suffix:
        return ""
    return f"{ext.domain}.{ext.suffix}"


def _kb(num_bytes: int) -> str:
    return f"{num_bytes // 1024}KB"


def _mb(num_bytes: int) -> str:
    return f"{num_bytes // (1024 * 1024)}MB"


def build_tips(
    result: AuditResult,
    large_image_bytes: int = 300 * 1024,
    large_script_bytes: int = 200 * 1024,
    heavy_page_bytes: int = 2 * 1024 * 1024,
) -> List[str]:
    """Generate page weight recommendations based on the measured assets."""
    tips = []

    large_images = [a for a in result.assets if a.type == AssetType.IMAGE and a.bytes > large_image_bytes]
    if large_images:
        tips.append(f"Compress {len(large_images)} large images (>{_kb(large_image_bytes)}).")

    large_scripts = [a for a in result.assets if a.type == AssetType.SCRIPT and a.bytes > large_script_bytes]
    if large_scripts:
        tips.append(f"Reduce or defer {len(large_scripts)} large JS files (>{_kb(large_script_bytes)}).")

    if result.total_bytes > heavy_page_bytes:
        tips.append(
            f"Overall page >{_mb(heavy_page_bytes)}. Consider lazy-loading and next-gen image formats."
        )

    domain = registrable_domain(result.source_url)
    if domain:
        tips.append(f"Consider a CDN for {domain} and enable compression (gzip/brotli).")

    return tips
