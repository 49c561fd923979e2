"""
pathment_scanner
================
Finds and classifies resource references ("Pathments") in free-form text:
web URLs, e-mail addresses, local / UNC / file-URI paths, IP addresses and
host names.

Package structure
-----------------
pathment_scanner/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m pathment_scanner``
├── config.py         – configuration constants
├── heuristics.py     – curated TLD and file-extension tables
├── protocol.py       – TransferProtocol enum and protocol detector
├── clipboard.py      – clipboard routing (single entity vs. block scan)
├── sanitize.py       – known-URL cleaning (Amazon, eBay)
├── cli.py            – argparse CLI (``pathment-scan``)
├── core/             – value types
│   ├── web_url.py    – WebUrl
│   ├── file_path.py  – FilePath
│   ├── pathment.py   – Pathment, Type, ordering
│   └── convert.py    – pathlib / URI adapters, protocol switching
├── extraction/       – text -> Pathments
│   ├── splitters.py  – WebUrl / FilePath splitters and validators
│   ├── classifier.py – parse_single
│   ├── tokenizer.py  – master tokenizer and candidate cleaner
│   ├── orchestrator.py – perform_extraction / ScanResult
│   └── html_parser.py  – pasted HTML via BeautifulSoup
└── utils/            – logging and string helpers

Quick start
-----------
    from pathment_scanner import perform_extraction, parse

    result = perform_extraction("Mail bob@example.com or see https://example.com/docs")
    for p in result.valid_pathments:
        print(p.display_type_label, p.address_for_uri)

    parse(r"C:\\Users\\a\\doc.txt").type   # Type.LOCAL_PATH
"""

from .core import Pathment, Type, WebUrl, FilePath, sort_pathments
from .core import from_path, from_uri, switch_protocol
from .protocol import TransferProtocol
from .extraction import (
    ScanResult,
    extract_from_html,
    parse,
    parse_single,
    perform,
    perform_extraction,
)
from .clipboard import analyze_clipboard_text
from .sanitize import UrlSanitizationOptions, clean_known_url

__all__ = [
    "Pathment",
    "Type",
    "WebUrl",
    "FilePath",
    "sort_pathments",
    "from_path",
    "from_uri",
    "switch_protocol",
    "TransferProtocol",
    "ScanResult",
    "extract_from_html",
    "parse",
    "parse_single",
    "perform",
    "perform_extraction",
    "analyze_clipboard_text",
    "UrlSanitizationOptions",
    "clean_known_url",
]
