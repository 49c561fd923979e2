"""
Extraction orchestrator: text block -> sorted, de-duplicated Pathments.
"""

from typing import NamedTuple

from pathment_scanner.core.pathment import Pathment, Type, sort_pathments
from pathment_scanner.extraction.classifier import parse_single
from pathment_scanner.extraction.tokenizer import clean_candidate, iter_candidates
from pathment_scanner.utils.log import log


class ScanResult(NamedTuple):
    """Outcome of one scan: classified Pathments and leftover tokens that
    contain a dot but could not be classified (``v2.0``, ``e.g``...)."""
    valid_pathments: list[Pathment]
    unspecified_tokens: list[Pathment]


def _category_tag(pathment: Pathment) -> str:
    t = pathment.type
    if t.is_network_address:
        return "[URL]"
    if t.is_email:
        return "[EMAIL]"
    if t.is_file_based:
        return "[PATH]"
    if t.is_one_of(Type.IP_ADDRESS, Type.HOSTNAME):
        return "[HOST]"
    return "[SCAN]"


def perform_extraction(raw_text: str | None) -> ScanResult:
    """
    Find every Pathment in *raw_text*.

    Candidates are tokenized, cleaned and classified one by one.  Duplicates
    (by Pathment equality) are dropped keeping the first occurrence, then
    both lists are sorted by :func:`~pathment_scanner.core.pathment.default_sort_key`.
    Blank input gives two empty lists.
    """
    if raw_text is None or not raw_text.strip():
        return ScanResult([], [])

    valid: dict[Pathment, None] = {}
    unspecified: dict[Pathment, None] = {}

    for raw in iter_candidates(raw_text):
        candidate = clean_candidate(raw)
        if not candidate:
            continue
        pathment = parse_single(candidate)
        if pathment.type.is_specified:
            if pathment in valid:
                log.debug("[DUP] %s", candidate)
            else:
                log.debug("%s %s", _category_tag(pathment), pathment.address_for_display)
            valid.setdefault(pathment)
        elif "." in candidate:
            unspecified.setdefault(pathment)
        else:
            log.debug("[SKIP] %s", candidate)

    log.debug(
        "[SCAN] %d pathment(s), %d unspecified token(s)",
        len(valid), len(unspecified),
    )
    return ScanResult(sort_pathments(valid), sort_pathments(unspecified))


def perform(raw_text: str | None) -> list[Pathment]:
    """Shorthand for the valid Pathments of :func:`perform_extraction`."""
    return perform_extraction(raw_text).valid_pathments
