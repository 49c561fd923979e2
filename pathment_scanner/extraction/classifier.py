"""
Single-entity classifier.

:func:`parse_single` decides what one cleaned candidate string is.  The
protocol detector picks the branch; structural splitters and validators then
either confirm the guess or let the text fall through to ``UNSPECIFIED``.
"""

from pathment_scanner.config import UNSPECIFIED_TITLE_MAX_LENGTH
from pathment_scanner.core.pathment import Pathment
from pathment_scanner.extraction.splitters import (
    is_email,
    is_hostname,
    is_ipv4,
    is_ipv6,
    split_file_path,
    split_web_url,
    validate_and_finalize_web_url,
)
from pathment_scanner.heuristics import looks_like_domain
from pathment_scanner.protocol import TransferProtocol
from pathment_scanner.utils.log import log
from pathment_scanner.utils.text import truncate

_WEB_PROTOCOLS = frozenset({
    TransferProtocol.HTTPS,
    TransferProtocol.HTTP,
    TransferProtocol.FTP,
    TransferProtocol.SSH,
    TransferProtocol.TELNET,
})

_FILE_PROTOCOLS = frozenset({
    TransferProtocol.PATH,
    TransferProtocol.UNC,
    TransferProtocol.FILE_URL,
    TransferProtocol.MALFORMED_FILE_URL,
})


def parse_single(raw_text: str | None) -> Pathment:
    """
    Classify *raw_text* as exactly one Pathment.

    Never raises: anything that cannot be classified with confidence comes
    back as ``UNSPECIFIED`` with the trimmed text as its address.
    """
    if raw_text is None or not raw_text.strip():
        return Pathment.create_unspecified(raw_text or "")

    text = raw_text.strip()
    detected = TransferProtocol.detect(text)

    if detected in _WEB_PROTOCOLS:
        web_url = split_web_url(text)
        if validate_and_finalize_web_url(web_url, text):
            return Pathment.from_web_url(web_url)

    elif detected is TransferProtocol.MAILTO:
        address = text[len(TransferProtocol.MAILTO.notation):].split("?", 1)[0]
        if is_email(address):
            return Pathment.from_email(address)

    elif detected in _FILE_PROTOCOLS:
        file_path = split_file_path(text)
        if file_path is not None and file_path.path_without_protocol:
            pathment = Pathment.from_file_path(file_path, detected)
            if pathment.type.is_specified:
                return pathment

    elif detected is TransferProtocol.PROMPT:
        return Pathment.from_prompt(text)

    elif detected is TransferProtocol.NONE:
        pathment = _parse_bare(text)
        if pathment is not None:
            return pathment

    else:
        log.debug("[SKIP] No classifier branch for %s: %r", detected.name, text)

    return Pathment.create_unspecified(text, truncate(text, UNSPECIFIED_TITLE_MAX_LENGTH))


def _parse_bare(text: str) -> Pathment | None:
    """Heuristics for text without any protocol indicator."""
    if "@" in text and is_email(text):
        return Pathment.from_email(text)

    if is_ipv4(text) or is_ipv6(text):
        return Pathment.from_ip_address(text)

    if text.lower().startswith("www."):
        web_url = split_web_url(TransferProtocol.HTTPS.notation + text)
        if validate_and_finalize_web_url(web_url, text):
            return Pathment.from_web_url(web_url)

    if text.lower() == "localhost" or (is_hostname(text) and looks_like_domain(text)):
        return Pathment.from_hostname(text)

    return None


# Public name used by callers that classify a single pasted entity.
parse = parse_single
