"""
Adapters from standard library objects to Pathments.
"""

import os

from pathment_scanner.core.pathment import Pathment
from pathment_scanner.core.web_url import WebUrl
from pathment_scanner.protocol import TransferProtocol
from pathment_scanner.utils.log import log


def from_path(path: os.PathLike | str | None) -> Pathment:
    """
    Build a file-based Pathment from a ``pathlib`` path (or any path-like).

    The path goes straight to the file-path splitter, so no text heuristics
    are involved.
    """
    from pathment_scanner.extraction.splitters import split_file_path

    if path is None:
        log.warning("Cannot convert from a None path")
        return Pathment.create_unspecified("")
    raw = os.fspath(path)
    return Pathment.from_file_path(split_file_path(raw), TransferProtocol.detect(raw))


def from_uri(uri: str | None) -> Pathment:
    """Classify a URI string with the regular single-entity parser."""
    from pathment_scanner.extraction.classifier import parse_single

    if uri is None:
        log.warning("Cannot convert from a None URI")
        return Pathment.create_unspecified("")
    return parse_single(uri)


def switch_protocol(pathment: Pathment | None, protocol: TransferProtocol | None) -> Pathment | None:
    """
    Return a copy of a web Pathment using *protocol* (``http`` -> ``https``).

    Anything that is not a web URL is returned unchanged.
    """
    if pathment is None or protocol is None:
        log.warning("Invalid parameters for switching protocol")
        return pathment

    web_url: WebUrl | None = pathment.web_url
    if web_url is None or not pathment.type.is_web_url:
        log.warning(
            "Protocol switching is only supported for web URLs, not %s",
            pathment.type.name,
        )
        return pathment

    return Pathment.from_web_url(web_url.with_protocol(protocol))
