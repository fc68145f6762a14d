"""
PageCarbon — Asset Extractor
Finds stylesheets, scripts and images referenced by a page's HTML.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup

DEFAULT_MAX_IMAGES = 20


class AssetType(str, Enum):
    STYLESHEET = "css"
    SCRIPT = "js"
    IMAGE = "img"


@dataclass(frozen=True)
class AssetReference:
    """An asset reference exactly as written in the HTML (not yet absolute)."""
    type: AssetType
    raw_source: str


# Anything that turns markup into a document supporting find_all(name, attrs=...)
HtmlParser = Callable[[str], BeautifulSoup]


def parse_html(html: str) -> BeautifulSoup:
    """Lenient parse using the stdlib-backed parser; never raises on bad markup."""
    return BeautifulSoup(html, "html.parser")


def _attr(element, name: str) -> Optional[str]:
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None or not value.strip():
        return None
    return value


def _is_stylesheet(link) -> bool:
    rel = link.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return any(token.lower() == "stylesheet" for token in rel)


def extract_assets(
    html: str,
    max_images: int = DEFAULT_MAX_IMAGES,
    parser: HtmlParser = parse_html,
) -> List[AssetReference]:
    """
    Collect raw asset references in discovery order.

    Stylesheets come first, then scripts, then images; each group keeps
    document order. Only the first `max_images` <img src> elements are
    considered, before any deduplication. Inline scripts and elements with
    an empty or missing attribute are skipped.
    """
    document = parser(html)
    references: List[AssetReference] = []

    for link in document.find_all("link"):
        if not _is_stylesheet(link):
            continue
        href = _attr(link, "href")
        if href:
            references.append(AssetReference(AssetType.STYLESHEET, href))

    for script in document.find_all("script", src=True):
        src = _attr(script, "src")
        if src:
            references.append(AssetReference(AssetType.SCRIPT, src))

    # find_all treats limit=0 as "no limit"
    if max_images > 0:
        for img in document.find_all("img", src=True, limit=max_images):
            src = _attr(img, "src")
            if src:
                references.append(AssetReference(AssetType.IMAGE, src))

    return references


def dedupe_assets(pairs: Iterable[Tuple[AssetType, str]]) -> List[Tuple[AssetType, str]]:
    """
    Drop repeated URLs, keeping the first occurrence and its type.

    URLs are compared as exact strings; no trailing-slash, case or query
    normalisation is applied.
    """
    seen = set()
    out: List[Tuple[AssetType, str]] = []
    for asset_type, url in pairs:
        if url in seen:
            continue
        seen.add(url)
        out.append((asset_type, url))
    return out
