"""Tokenizing, classifying and scanning text for Pathments."""

from pathment_scanner.extraction.splitters import (
    split_file_path,
    split_web_url,
    validate_and_finalize_web_url,
)
from pathment_scanner.extraction.classifier import parse, parse_single
from pathment_scanner.extraction.tokenizer import (
    MATCHERS,
    Token,
    clean_candidate,
    iter_candidates,
    tokenize,
)
from pathment_scanner.extraction.orchestrator import ScanResult, perform, perform_extraction
from pathment_scanner.extraction.html_parser import extract_from_html

__all__ = [
    "split_file_path",
    "split_web_url",
    "validate_and_finalize_web_url",
    "parse",
    "parse_single",
    "MATCHERS",
    "Token",
    "clean_candidate",
    "iter_candidates",
    "tokenize",
    "ScanResult",
    "perform",
    "perform_extraction",
    "extract_from_html",
]
