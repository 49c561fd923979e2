"""
Transfer protocols and the protocol detector.

:class:`TransferProtocol` is the first dispatch key of the classifier:
:meth:`TransferProtocol.detect` looks at the start of a cleaned candidate and
returns a coarse category (web scheme, mail, file-like, prompt or ``NONE``).
The checks run in a fixed order so that unambiguous indicators win, e.g. a
``\\\\server`` prefix is UNC before anything else is considered.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

_WINDOWS_PATH_RE = re.compile(r"^[a-zA-Z]:[/\\]")
_RELATIVE_PREFIXES = ("./", "../", ".\\", "..\\")

# Ordered prefix table for detect(); first hit wins.
_SCHEME_PREFIXES: tuple[tuple[str, str], ...] = (
    ("mailto:",   "MAILTO"),
    ("https://",  "HTTPS"),
    ("http://",   "HTTP"),
    ("ftp://",    "FTP"),
    ("telnet://", "TELNET"),
    ("smtp://",   "SMTP"),
    ("pop3://",   "POP3"),
    ("imap://",   "IMAP"),
)

_FILE_DRIVE_RE = re.compile(r"^file:/*(?=[a-zA-Z]:)", re.IGNORECASE)
_FILE_SINGLE_SLASH_RE = re.compile(r"^file:/(?!/)", re.IGNORECASE)
_FILE_PREFIX_RE = re.compile(r"^file:/*", re.IGNORECASE)


class TransferProtocol(Enum):
    """Transfer protocol tag carried by every Pathment.

    Each member holds a short UI ``label``, the ``notation`` written in front
    of an address (``"https://"``), its URI ``scheme`` and a ``description``.
    """

    NONE = ("<?>", None, None, "Not specified or could not be determined")
    PATH = ("PATH", None, None, "Local file system path")
    UNC = ("UNC", "\\\\", "unc", "UNC network share path")

    FILE_URL = ("FILE-URI", "file://", "file", "URI for a file resource (e.g. file://server/share)")

    HTTPS = ("HTTPS", "https://", "https", "Secure Hypertext Transfer Protocol (SSL/TLS)")
    HTTP = ("HTTP", "http://", "http", "Hypertext Transfer Protocol (unencrypted)")
    FTP = ("FTP", "ftp://", "ftp", "File Transfer Protocol")
    SSH = ("SSH", "ssh://", "ssh", "Secure Shell Protocol")
    TELNET = ("TELNET", "telnet://", "telnet", "Telnet Protocol")

    MAILTO = ("EMAIL", "mailto:", "mailto", "Protocol for email addresses")
    SMTP = ("SMTP", "smtp://", "smtp", "Simple Mail Transfer Protocol")
    POP3 = ("POP3", "pop3://", "pop3", "Post Office Protocol version 3")
    IMAP = ("IMAP", "imap://", "imap", "Internet Message Access Protocol")

    COMMAND = ("CMD", None, "cmd", "Internal or execution command")
    PROMPT = ("PROMPT", None, "prompt", "Command prompt indicator")

    MALFORMED_FILE_URL = ("FILE-URI?", "file://", "file", "Malformed file scheme (e.g. file:/path)")

    def __init__(self, label: str, notation: str | None, scheme: str | None, description: str) -> None:
        self.label = label
        self._notation = notation
        self.scheme = scheme
        self.description = description

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    @classmethod
    def detect(cls, address: str | None) -> TransferProtocol:
        """
        Detect the protocol of a raw address string.

        Order: UNC, ``ssh://``, prompt markers, URI schemes, ``file:``
        (valid ``file://`` or malformed), absolute and relative paths.
        Returns ``NONE`` for blank input or when nothing matches.
        """
        if not address or not address.strip():
            return cls.NONE

        lower = address.lower()

        if lower.startswith("\\\\"):
            return cls.UNC
        if lower.startswith("ssh://"):
            return cls.SSH
        if lower.startswith(("$ ", "> ")):
            return cls.PROMPT

        for prefix, name in _SCHEME_PREFIXES:
            if lower.startswith(prefix):
                return cls[name]

        if lower.startswith("file:"):
            return cls.FILE_URL if lower.startswith("file://") else cls.MALFORMED_FILE_URL

        if _WINDOWS_PATH_RE.match(address) or address.startswith("/"):
            return cls.PATH
        if address.startswith(_RELATIVE_PREFIXES):
            return cls.PATH

        return cls.NONE

    @classmethod
    def from_scheme(cls, scheme: str | None) -> TransferProtocol:
        """Case-insensitive lookup by URI scheme; ``NONE`` when unknown."""
        if not scheme or not scheme.strip():
            return cls.NONE
        return _SCHEME_MAP.get(scheme.strip().lower(), cls.NONE)

    @classmethod
    def is_web_scheme(cls, scheme: str | None) -> bool:
        return cls.from_scheme(scheme).is_web

    # ------------------------------------------------------------------
    # Normalisation
    # ------------------------------------------------------------------

    @classmethod
    def normalize(cls, address: str | None) -> str | None:
        """
        Repair common notation problems in *address*.

        * backslashes become forward slashes
        * ``file:/C:/x`` and ``file:C:/x`` become ``file:///C:/x``
        * ``file:/home/x`` becomes ``file:///home/x``
        * URL-based schemes missing their ``//`` get it back
          (``http:example.com`` -> ``http://example.com``)
        """
        if not address or not address.strip():
            return address

        a = address.strip().replace("\\", "/")

        if _FILE_DRIVE_RE.match(a):
            return _FILE_DRIVE_RE.sub("file:///", a, count=1)
        if _FILE_SINGLE_SLASH_RE.match(a):
            return _FILE_SINGLE_SLASH_RE.sub("file:///", a, count=1)

        colon = a.find(":")
        if 0 < colon < len(a) - 1 and a[colon + 1] != "/":
            scheme = a[:colon]
            protocol = _SCHEME_MAP.get(scheme.lower())
            if protocol is not None and protocol.is_url_based:
                return f"{scheme}://{a[colon + 1:]}"

        return a

    @classmethod
    def remove_from(cls, address: str) -> str:
        """Strip the protocol notation from the start of *address*."""
        protocol = cls.detect(address)
        if protocol is cls.MALFORMED_FILE_URL:
            return _FILE_PREFIX_RE.sub("", address, count=1)
        if protocol is cls.NONE or not protocol.has_notation:
            return address
        return address[len(protocol.notation):]

    @staticmethod
    def localized_path(file_address: str) -> Path:
        """
        Convert a file address (``file:`` URI, Windows or Unix path) to a
        normalised :class:`~pathlib.Path`.

        Raises ``ValueError`` for blank input.
        """
        if file_address is None:
            raise ValueError("file_address cannot be None")
        normalized = file_address.replace("\\", "/").strip()
        if not normalized:
            raise ValueError("file_address cannot be blank")

        m = _FILE_PREFIX_RE.match(normalized)
        if m:
            slashes = m.end() - len("file:")
            normalized = normalized[m.end():]
            if not _WINDOWS_PATH_RE.match(normalized):
                # file://server/share -> //server/share, file:///home -> /home
                normalized = ("//" if slashes == 2 else "/") + normalized
        return Path(normalized)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def notation(self) -> str:
        return self._notation or ""

    @property
    def has_notation(self) -> bool:
        return bool(self._notation and self._notation.strip())

    @property
    def is_web(self) -> bool:
        return self in (TransferProtocol.HTTPS, TransferProtocol.HTTP)

    @property
    def is_file_url(self) -> bool:
        return self is TransferProtocol.FILE_URL

    @property
    def is_local_or_unc_path(self) -> bool:
        return self in (TransferProtocol.PATH, TransferProtocol.UNC)

    @property
    def is_url_based(self) -> bool:
        """True for protocols written as ``scheme://host...``."""
        return self in _URL_BASED


_URL_BASED = frozenset({
    TransferProtocol.HTTPS,
    TransferProtocol.HTTP,
    TransferProtocol.FTP,
    TransferProtocol.SSH,
    TransferProtocol.TELNET,
    TransferProtocol.SMTP,
    TransferProtocol.POP3,
    TransferProtocol.IMAP,
})

# First member wins for a shared scheme, so "file" maps to FILE_URL.
_SCHEME_MAP: dict[str, TransferProtocol] = {}
for _protocol in TransferProtocol:
    if _protocol.scheme is not None:
        _SCHEME_MAP.setdefault(_protocol.scheme.lower(), _protocol)
del _protocol
