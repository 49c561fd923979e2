"""
Logging configuration for the Pathment scanner.

Provides:
* ANSI colour highlights for ``[CATEGORY]`` tags such as ``[URL]`` or ``[PATH]``
* GitHub Actions CI support (``::warning::``, ``::error::``)
* An optional file handler that always captures DEBUG detail

Library modules only emit records on :data:`log`; handlers are installed by
:func:`setup_logging`, which the command-line front end calls.
"""

import logging
import os
from pathlib import Path

import colorlog

log = logging.getLogger("pathment-scanner")

_CONSOLE_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_CONSOLE_DATEFMT = "%H:%M:%S"
_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}

# ── Category colours ───────────────────────────────────────────────
_ANSI_RESET = "\033[0m"
_CATEGORY_STYLES: dict[str, str] = {
    "[URL]":     "\033[1;34m",
    "[EMAIL]":   "\033[1;35m",
    "[PATH]":    "\033[1;32m",
    "[HOST]":    "\033[36m",
    "[SCAN]":    "\033[37m",
    "[HTML]":    "\033[37m",
    "[CLEAN]":   "\033[33m",
    "[SPLIT]":   "\033[90m",
    "[SKIP]":    "\033[90m",
    "[DUP]":     "\033[90m",
    "[ERR]":     "\033[1;31m",
}


def ci_enabled() -> bool:
    """True when running inside GitHub Actions."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _apply_category_styles(msg: str) -> str:
    """Inject ANSI colours for known ``[CATEGORY]`` tags in *msg*."""
    for tag, style in _CATEGORY_STYLES.items():
        if tag in msg:
            msg = msg.replace(tag, f"{style}{tag}{_ANSI_RESET}")
    return msg


class _ColorlogCategoryFormatter(colorlog.ColoredFormatter):
    """``colorlog.ColoredFormatter`` that also highlights inline
    ``[CATEGORY]`` tags."""

    def format(self, record: logging.LogRecord) -> str:
        return _apply_category_styles(super().format(record))


class _CIFormatter(logging.Formatter):
    """Formatter for GitHub Actions.

    Prefixes warnings and errors with ``::warning::`` / ``::error::`` so they
    show up as annotations in the Actions UI.
    """

    _CI_COMMANDS: dict[int, str] = {
        logging.WARNING:  "::warning::",
        logging.ERROR:    "::error::",
        logging.CRITICAL: "::error::",
    }

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        prefix = self._CI_COMMANDS.get(record.levelno, "")
        return f"{prefix}{formatted}" if prefix else formatted


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure the package logger.

    Parameters
    ----------
    debug : bool
        Enable DEBUG-level console output (default is INFO).
    log_file : str | None
        If given, also write every record (DEBUG and up) to this file.
    """
    log.setLevel(logging.DEBUG if (debug or log_file) else logging.INFO)
    log.handlers.clear()
    log.propagate = False

    if ci_enabled():
        handler = logging.StreamHandler()
        handler.setFormatter(_CIFormatter(_CONSOLE_FMT, datefmt=_CONSOLE_DATEFMT))
    else:
        handler = colorlog.StreamHandler()
        handler.setFormatter(_ColorlogCategoryFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
            datefmt=_CONSOLE_DATEFMT,
            log_colors=_LOG_COLORS,
        ))
    handler.setLevel(logging.DEBUG if debug else logging.INFO)
    log.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.debug("Logging to file: %s", log_path.resolve())
