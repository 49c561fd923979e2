"""
Command-line interface for the Pathment scanner.
"""

import argparse
import json
import sys
from pathlib import Path

from tqdm import tqdm as _tqdm

from pathment_scanner.clipboard import analyze_clipboard_text
from pathment_scanner.config import DEFAULT_FORMAT, DEFAULT_LOG_FILE, OUTPUT_FORMATS
from pathment_scanner.core.pathment import Pathment
from pathment_scanner.extraction.classifier import parse
from pathment_scanner.extraction.html_parser import extract_from_html
from pathment_scanner.extraction.orchestrator import ScanResult, perform_extraction
from pathment_scanner.sanitize import UrlSanitizationOptions, clean_known_url
from pathment_scanner.utils.log import log, setup_logging

_STDIN = "-"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathment-scan",
        description="Find and classify URLs, e-mail addresses, file paths, "
                    "IP addresses and host names in text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  pathment-scan notes.txt\n"
            "  pathment-scan --html page.html --format json\n"
            "  echo user@example.com | pathment-scan --single\n"
            "  pathment-scan a.txt b.txt --sanitize --log-file scan.log\n"
        ),
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="Text files to scan (default: read standard input)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--single", action="store_true",
        help="Classify the whole input as one entity",
    )
    mode.add_argument(
        "--clipboard", action="store_true",
        help="Route the input like a clipboard paste (short = single entity, "
             "long or multi-line = scan)",
    )
    mode.add_argument(
        "--html", action="store_true",
        help="Treat the input as HTML and include link targets",
    )
    parser.add_argument(
        "--sanitize", action="store_true",
        help="Strip tracking parameters from known shop URLs (Amazon, eBay)",
    )
    parser.add_argument(
        "--show-unspecified", action="store_true",
        help="Also list dotted tokens that could not be classified",
    )
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS,
        default=DEFAULT_FORMAT if DEFAULT_FORMAT in OUTPUT_FORMATS else "table",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file", default=DEFAULT_LOG_FILE,
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def scan_text(text: str, args: argparse.Namespace) -> ScanResult:
    """Run the analysis selected by the mode flags in *args*."""
    if args.single:
        return ScanResult([parse(text)], [])
    if args.clipboard:
        return ScanResult(analyze_clipboard_text(text), [])
    if args.html:
        return extract_from_html(text)
    return perform_extraction(text)


def pathment_record(pathment: Pathment, source: str, sanitize: bool = False) -> dict:
    uri = pathment.address_for_uri
    if sanitize and pathment.type.is_web_url:
        uri = clean_known_url(uri, UrlSanitizationOptions.all_enabled())
    return {
        "source": source,
        "type": pathment.type.value,
        "label": pathment.display_type_label,
        "address": pathment.address_for_display,
        "uri": uri,
        "title": pathment.title,
    }


def format_table(records: list[dict]) -> str:
    if not records:
        return ""
    label_w = max(len(r["label"]) for r in records)
    type_w = max(len(r["type"]) for r in records)
    lines = []
    for r in records:
        lines.append(f"{r['label']:<{label_w}}  {r['type']:<{type_w}}  {r['uri']}")
    return "\n".join(lines)


def _read_source(source: str) -> str:
    if source == _STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    sources = args.files or [_STDIN]
    records: list[dict] = []
    failed = 0

    for source in _tqdm(sources, desc="Scanning", unit="file", disable=len(sources) < 2):
        try:
            text = _read_source(source)
        except OSError as exc:
            log.error("[ERR] Cannot read %s: %s", source, exc)
            failed += 1
            continue

        result = scan_text(text, args)
        found = list(result.valid_pathments)
        if args.show_unspecified:
            found += result.unspecified_tokens
        log.debug("[SCAN] %s: %d result(s)", source, len(found))
        records.extend(pathment_record(p, source, args.sanitize) for p in found)

    if args.format == "json":
        print(json.dumps(records, indent=2, ensure_ascii=False))
    elif records:
        print(format_table(records))
    else:
        log.info("No addresses found")

    return 1 if failed else 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log.warning("Interrupted")
        sys.exit(130)
