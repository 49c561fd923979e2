"""
Known-URL sanitization.

Removes tracking noise from shop links that are commonly pasted:

* eBay item (``/itm/``) and catalogue (``/p/``) links lose their query string
* Amazon product links are rewritten to ``https://www.<amazon-domain>/dp/<ASIN>``

Every URL is first percent-decoded (see :meth:`Pathment.decode_url`), even
when all rules are disabled.
"""

import re
from dataclasses import dataclass

from pathment_scanner.core.pathment import Pathment
from pathment_scanner.extraction.classifier import parse_single
from pathment_scanner.utils.log import log

_AMAZON_ASIN_RE = re.compile(
    r"(?:dp|gp/product|gp/aw/d|exec/obidos/asin)/([A-Z0-9]{10})", re.IGNORECASE
)
_AMAZON_DOMAIN_RE = re.compile(r"amazon\.[a-z.]+")
_AMAZON_DEFAULT_DOMAIN = "amazon.de"


@dataclass(frozen=True)
class UrlSanitizationOptions:
    """Which cleaning rules apply.  ``master_active`` gates all of them."""

    master_active: bool = False
    amazon_active: bool = False
    ebay_active: bool = False

    @classmethod
    def disabled(cls) -> "UrlSanitizationOptions":
        return cls(False, False, False)

    @classmethod
    def all_enabled(cls) -> "UrlSanitizationOptions":
        return cls(True, True, True)


def clean_known_url(url: str | None, options: UrlSanitizationOptions | None) -> str | None:
    """
    Return *url* decoded and, for enabled shop rules, stripped of tracking
    parameters.  Anything that is not a web URL is only decoded.
    """
    if url is None or not url.strip():
        return url

    decoded = Pathment.decode_url(url)
    pathment = parse_single(decoded)

    if options is None or not options.master_active:
        return decoded
    web_url = pathment.web_url
    if web_url is None or not pathment.type.is_web_url:
        return decoded

    host = web_url.host.lower()
    path = web_url.path

    if options.ebay_active and "ebay." in host and ("/itm/" in path or "/p/" in path):
        cleaned = pathment.protocol.notation + web_url.host + path
        log.debug("[CLEAN] eBay %s -> %s", url, cleaned)
        return cleaned

    if options.amazon_active and ("amazon." in host or "amzn.to" in host):
        cleaned = _sanitize_amazon_url(decoded)
        if cleaned != decoded:
            log.debug("[CLEAN] Amazon %s -> %s", url, cleaned)
        return cleaned

    return decoded


def _sanitize_amazon_url(url: str) -> str:
    m = _AMAZON_ASIN_RE.search(url)
    if not m:
        return url
    domain_match = _AMAZON_DOMAIN_RE.search(url.lower())
    domain = domain_match.group() if domain_match else _AMAZON_DEFAULT_DOMAIN
    return f"https://www.{domain}/dp/{m.group(1)}"
