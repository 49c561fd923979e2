"""
Configuration constants for the Pathment scanner.
"""

import os

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------
# Clipboard text longer than this (or containing a newline) is scanned as a
# block instead of being classified as one entity.
BLOCK_TEXT_MIN_LENGTH = 200

UNSPECIFIED_TITLE_MAX_LENGTH = 60

# Nested percent-encodings such as %2520 are decoded at most this many times
MAX_DECODE_PASSES = 3

# Placeholder substituted for an extracted address in its surrounding text
PATH_CONTAINER = "{&Path}"

# ---------------------------------------------------------------------------
# CLI defaults (can also be supplied via PATHMENT_FORMAT / PATHMENT_LOG_FILE)
# ---------------------------------------------------------------------------
OUTPUT_FORMATS = ("table", "json")
DEFAULT_FORMAT = os.environ.get("PATHMENT_FORMAT", "table")
DEFAULT_LOG_FILE = os.environ.get("PATHMENT_LOG_FILE") or None

# ---------------------------------------------------------------------------
# HTML paste extraction
# ---------------------------------------------------------------------------
# HTML tag -> list of address-bearing attributes
HTML_ATTR_MAP: dict[str, list[str]] = {
    "a":      ["href"],
    "link":   ["href"],
    "area":   ["href"],
    "img":    ["src", "data-src"],
    "source": ["src"],
    "iframe": ["src"],
    "form":   ["action"],
    "object": ["data"],
    "embed":  ["src"],
    "audio":  ["src"],
    "video":  ["src", "poster"],
    "meta":   [],          # handled separately for http-equiv=refresh
}
