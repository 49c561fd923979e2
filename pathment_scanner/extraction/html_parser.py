"""
Pathment extraction from pasted rich text (HTML) via BeautifulSoup.
"""

import re

from bs4 import BeautifulSoup

from pathment_scanner.config import HTML_ATTR_MAP
from pathment_scanner.extraction.orchestrator import ScanResult, perform_extraction
from pathment_scanner.utils.log import log

_BS4_PARSER = "lxml"
_META_REFRESH_RE = re.compile(r"url=([^\s;\"']+)", re.I)
_IGNORED_PREFIXES = ("data:", "javascript:", "#")


def collect_html_addresses(html: str) -> list[str]:
    """
    Return the address-bearing attribute values of *html* in document
    order (``href``, ``src``, ``action``, meta refresh targets, ...).

    ``data:`` and ``javascript:`` values and bare fragments are skipped.
    """
    soup = BeautifulSoup(html, _BS4_PARSER)
    found: list[str] = []

    def _add(raw: str) -> None:
        raw = raw.strip()
        if raw and not raw.lower().startswith(_IGNORED_PREFIXES):
            found.append(raw)

    for el in soup.find_all(list(HTML_ATTR_MAP)):
        for attr in HTML_ATTR_MAP[el.name]:
            val = el.get(attr)
            if val:
                _add(val)
        if el.name == "meta":
            m = _META_REFRESH_RE.search(el.get("content", ""))
            if m:
                _add(m.group(1))
    return found


def html_to_text(html: str) -> str:
    """Visible text of *html*, scripts and styles removed."""
    soup = BeautifulSoup(html, _BS4_PARSER)
    for el in soup(["script", "style"]):
        el.decompose()
    return soup.get_text(" ")


def extract_from_html(html: str | None) -> ScanResult:
    """
    Scan pasted HTML: link targets first, then the visible text.

    Markup BeautifulSoup cannot handle is scanned as plain text instead.
    """
    if html is None or not html.strip():
        return ScanResult([], [])

    try:
        addresses = collect_html_addresses(html)
        text = html_to_text(html)
    except Exception as exc:
        log.warning("[HTML] Cannot parse markup, scanning as plain text: %s", exc)
        return perform_extraction(html)

    log.debug("[HTML] %d attribute address(es)", len(addresses))
    return perform_extraction("\n".join(addresses + [text]))
