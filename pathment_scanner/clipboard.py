"""
Clipboard routing: classify short pastes as one entity, scan long ones.
"""

from pathment_scanner.config import BLOCK_TEXT_MIN_LENGTH
from pathment_scanner.core.pathment import Pathment
from pathment_scanner.extraction.classifier import parse
from pathment_scanner.extraction.orchestrator import perform


def is_block_text(content: str) -> bool:
    """Multi-line or long content is treated as a block of prose."""
    return "\n" in content or len(content) > BLOCK_TEXT_MIN_LENGTH


def analyze_clipboard_text(content: str | None) -> list[Pathment]:
    """
    Pathments for a clipboard paste.

    Block text is scanned for every contained address.  A short single line
    is classified as one entity and returned even when ``UNSPECIFIED`` so the
    caller can still offer it as plain text.
    """
    if content is None or not content.strip():
        return []
    if is_block_text(content):
        return perform(content)
    return [parse(content)]
