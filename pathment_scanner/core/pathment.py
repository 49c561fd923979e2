"""
The Pathment value type.

A Pathment is one classified resource reference found in pasted text: a web
URL, an email address, a file path, an IP address, ...  It is a tagged
variant over :class:`Type` carrying at most one structural payload
(:class:`~pathment_scanner.core.web_url.WebUrl` or
:class:`~pathment_scanner.core.file_path.FilePath`).

Instances are created exclusively through the named factory classmethods
(``Pathment.from_email``, ``Pathment.from_web_url``, ...), which keep the
payload consistent with the type.  Apart from :attr:`Pathment.title` every
field is read-only.

Identity is ``(type, protocol, address without protocol, case-insensitive)``.
Two references that only differ in protocol tag (``google.com`` read as a
HOSTNAME, ``https://google.com`` read as a URL) are *not* equal.
"""

from __future__ import annotations

import urllib.parse
from enum import Enum
from typing import Iterable

from pathment_scanner.config import MAX_DECODE_PASSES, UNSPECIFIED_TITLE_MAX_LENGTH
from pathment_scanner.core.file_path import FilePath
from pathment_scanner.core.web_url import WebUrl
from pathment_scanner.protocol import TransferProtocol
from pathment_scanner.utils.log import log
from pathment_scanner.utils.text import truncate

_RELATIVE_PREFIXES = ("./", "../", ".\\", "..\\")
_PROMPT_MARKERS = ("$ ", "> ")


class Type(Enum):
    """Mutually exclusive Pathment categories."""

    UNSPECIFIED = "unspecified"

    URL_ADDRESS = "url_address"
    EMAIL = "email"
    FTP_ADDRESS = "ftp_address"
    SSH_ADDRESS = "ssh_address"
    TELNET_ADDRESS = "telnet_address"
    IP_ADDRESS = "ip_address"
    HOSTNAME = "hostname"

    FILE_URL = "file_url"
    LOCAL_PATH = "local_path"
    UNC_PATH = "unc_path"
    RELATIVE_PATH = "relative_path"

    EXEC_COMMAND = "exec_command"
    PROMPT = "prompt"

    def is_one_of(self, *types: Type) -> bool:
        return self in types

    @property
    def is_specified(self) -> bool:
        return self is not Type.UNSPECIFIED

    @property
    def is_web_url(self) -> bool:
        return self is Type.URL_ADDRESS

    @property
    def is_email(self) -> bool:
        return self is Type.EMAIL

    @property
    def is_network_address(self) -> bool:
        """URL-shaped network addresses that carry a WebUrl payload."""
        return self.is_one_of(Type.URL_ADDRESS, Type.FTP_ADDRESS, Type.SSH_ADDRESS, Type.TELNET_ADDRESS)

    @property
    def is_file_based(self) -> bool:
        return self.is_one_of(Type.LOCAL_PATH, Type.UNC_PATH, Type.FILE_URL, Type.RELATIVE_PATH)

    @property
    def is_local_or_unc_path(self) -> bool:
        return self.is_one_of(Type.LOCAL_PATH, Type.UNC_PATH)

    @property
    def is_verifiable(self) -> bool:
        """Types whose target could be checked over the network or on disk."""
        return self.is_network_address or self.is_one_of(Type.FILE_URL, Type.LOCAL_PATH, Type.UNC_PATH)

    @property
    def is_actionable_for_clipboard(self) -> bool:
        """Worth offering as a direct action when found on the clipboard."""
        return self.is_web_url or self.is_file_based or self is Type.EMAIL

    @property
    def sort_priority(self) -> int:
        return _SORT_PRIORITY[self]


_SORT_PRIORITY: dict[Type, int] = {
    Type.URL_ADDRESS: 10,
    Type.FTP_ADDRESS: 10,
    Type.SSH_ADDRESS: 10,
    Type.TELNET_ADDRESS: 10,
    Type.EMAIL: 20,
    Type.FILE_URL: 30,
    Type.LOCAL_PATH: 30,
    Type.UNC_PATH: 30,
    Type.RELATIVE_PATH: 30,
    Type.IP_ADDRESS: 40,
    Type.HOSTNAME: 40,
    Type.EXEC_COMMAND: 50,
    Type.PROMPT: 50,
    Type.UNSPECIFIED: 100,
}

_TYPE_ORDER = {t: i for i, t in enumerate(Type)}
_PROTOCOL_ORDER = {p: i for i, p in enumerate(TransferProtocol)}

_WEB_TYPES = {
    TransferProtocol.FTP: Type.FTP_ADDRESS,
    TransferProtocol.SSH: Type.SSH_ADDRESS,
    TransferProtocol.TELNET: Type.TELNET_ADDRESS,
}

# Only the factory classmethods below hold this key.
_FACTORY_KEY = object()


class Pathment:
    """A classified address.  Use the ``from_*`` factories to create one."""

    __slots__ = ("_type", "_protocol", "title", "_address", "_web_url", "_file_path")

    def __init__(
        self,
        key: object,
        type_: Type,
        protocol: TransferProtocol,
        title: str,
        address: str,
        web_url: WebUrl | None = None,
        file_path: FilePath | None = None,
    ) -> None:
        if key is not _FACTORY_KEY:
            raise TypeError("Pathment instances are created through the Pathment.from_* factories")
        self._type = type_
        self._protocol = protocol
        self.title = title
        self._address = address or ""
        self._web_url = web_url
        self._file_path = file_path

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_email(cls, email_address: str) -> Pathment:
        return cls(_FACTORY_KEY, Type.EMAIL, TransferProtocol.MAILTO, email_address, email_address)

    @classmethod
    def from_ip_address(cls, ip_address: str) -> Pathment:
        return cls(_FACTORY_KEY, Type.IP_ADDRESS, TransferProtocol.NONE, ip_address, ip_address)

    @classmethod
    def from_hostname(cls, hostname: str) -> Pathment:
        return cls(_FACTORY_KEY, Type.HOSTNAME, TransferProtocol.NONE, hostname, hostname)

    @classmethod
    def from_command(cls, command: str) -> Pathment:
        command = command.strip()
        return cls(_FACTORY_KEY, Type.EXEC_COMMAND, TransferProtocol.COMMAND, command, command)

    @classmethod
    def from_prompt(cls, prompt_line: str) -> Pathment:
        """``"$ ls -la"`` -> PROMPT whose address is ``ls -la``."""
        text = prompt_line.strip()
        for marker in _PROMPT_MARKERS:
            if text.startswith(marker.strip()):
                text = text[len(marker.strip()):].strip()
                break
        return cls(_FACTORY_KEY, Type.PROMPT, TransferProtocol.PROMPT, text, text)

    @classmethod
    def from_web_url(cls, web_url: WebUrl | None) -> Pathment:
        """
        Wrap a parsed WebUrl, mapping FTP, SSH and TELNET to their own types
        and everything else to URL_ADDRESS.  The host becomes the title.
        """
        if web_url is None:
            return cls.create_unspecified("")
        type_ = _WEB_TYPES.get(web_url.protocol, Type.URL_ADDRESS)
        return cls(
            _FACTORY_KEY, type_, web_url.protocol, web_url.host,
            web_url.display_url_without_protocol, web_url=web_url,
        )

    @classmethod
    def from_file_path(
        cls,
        file_path: FilePath | None,
        detected: TransferProtocol | None = None,
    ) -> Pathment:
        """
        Classify a FilePath.

        *detected* is the protocol the detector saw on the original text; a
        ``MALFORMED_FILE_URL`` there yields a FILE_URL tagged as malformed
        instead of a rejection.  Otherwise, in order: UNC prefix without a
        drive, ``file:`` scheme without a drive, relative prefix, drive or
        ``/``-rooted path, and finally UNSPECIFIED.
        """
        if file_path is None:
            return cls.create_unspecified("")

        title = file_path.full_name
        address = file_path.path_without_protocol

        if file_path.has_scheme and detected is TransferProtocol.MALFORMED_FILE_URL:
            return cls(
                _FACTORY_KEY, Type.FILE_URL, TransferProtocol.MALFORMED_FILE_URL,
                title, address, file_path=file_path,
            )

        full_path = file_path.full_path
        has_drive = file_path.has_drive

        if not has_drive and full_path.startswith(("//", "\\\\")):
            type_, protocol = Type.UNC_PATH, TransferProtocol.UNC
        elif file_path.has_scheme and not has_drive:
            type_, protocol = Type.FILE_URL, TransferProtocol.FILE_URL
        elif not has_drive and full_path.startswith(_RELATIVE_PREFIXES):
            type_, protocol = Type.RELATIVE_PATH, TransferProtocol.PATH
        elif has_drive or full_path.startswith("/"):
            type_, protocol = Type.LOCAL_PATH, TransferProtocol.PATH
        else:
            type_, protocol = Type.UNSPECIFIED, TransferProtocol.NONE

        return cls(_FACTORY_KEY, type_, protocol, title, address, file_path=file_path)

    @classmethod
    def create_unspecified(cls, raw_text: str | None, title: str | None = None) -> Pathment:
        """Fallback for text that could not be classified.  Without an
        explicit *title* the trimmed text, truncated, is used."""
        raw_text = raw_text or ""
        if title is None:
            title = truncate(raw_text.strip(), UNSPECIFIED_TITLE_MAX_LENGTH)
        return cls(_FACTORY_KEY, Type.UNSPECIFIED, TransferProtocol.NONE, title, raw_text)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def type(self) -> Type:
        return self._type

    @property
    def protocol(self) -> TransferProtocol:
        return self._protocol

    @property
    def web_url(self) -> WebUrl | None:
        return self._web_url

    @property
    def file_path(self) -> FilePath | None:
        return self._file_path

    @property
    def address_without_protocol(self) -> str:
        return self._address

    @property
    def address_for_display(self) -> str:
        """The address without any protocol prefix, for showing in a UI."""
        return self._address

    @property
    def is_malformed(self) -> bool:
        return self._protocol is TransferProtocol.MALFORMED_FILE_URL

    @property
    def is_verifiable(self) -> bool:
        return self._type.is_verifiable

    @property
    def has_protocol_notation(self) -> bool:
        return self._protocol.has_notation

    @property
    def display_type_label(self) -> str:
        """Short classification label: ``HTTPS``, ``PATH``, ``EMAIL``, ``IP``..."""
        t = self._type
        if t.is_network_address or t.is_file_based:
            return self._protocol.label
        return _TYPE_LABELS.get(t, "")

    @property
    def suggested_title(self) -> str:
        if self._type.is_network_address and self._web_url is not None:
            return self._web_url.host
        if self._type.is_file_based and self._file_path is not None:
            return self._file_path.full_name
        return self._address

    @property
    def address_for_uri(self) -> str:
        """
        Full address with its scheme, for open/copy actions:
        ``https://...``, ``file:///...``, ``mailto:...``.  IPs, hostnames and
        unspecified text are returned as displayed.
        """
        if self._web_url is not None and self._type.is_network_address:
            try:
                return self._web_url.to_uri_string()
            except ValueError as exc:
                log.debug("[ERR] Cannot build URI for %r: %s", self._address, exc)
                return self._protocol.notation + self._address

        if self._file_path is not None and self._type.is_file_based:
            return self._file_uri()

        if self._type is Type.EMAIL:
            return TransferProtocol.MAILTO.notation + self._address

        return self._address

    def _file_uri(self) -> str:
        fp = self._file_path
        path = fp.path_without_protocol.replace("\\", "/")
        file_scheme = TransferProtocol.FILE_URL.notation
        if fp.has_drive and path[len(fp.drive):].startswith("/"):
            # file:///C:/dir/name
            return f"{file_scheme}/{fp.drive}{urllib.parse.quote(path[len(fp.drive):])}"
        if self._type is Type.UNC_PATH:
            # \\server\share -> file://server/share
            return file_scheme + urllib.parse.quote(path.lstrip("/"))
        if path.startswith("/"):
            return file_scheme + urllib.parse.quote(path)
        if fp.has_scheme:
            # file://server/share/...
            return file_scheme + urllib.parse.quote(path, safe="/:@")
        return self._protocol.notation + self._address

    def canonical_address_for_comparison(
        self,
        ignore_protocol: bool = False,
        ignore_subdomain: bool = False,
        ignore_query: bool = False,
        ignore_fragment: bool = False,
    ) -> str:
        """
        Normalised address for duplicate detection.

        Web addresses are rebuilt from the selected components (protocol and
        host lower-cased, path kept as-is); file-based paths get ``/``
        separators and are lower-cased; everything else is the display
        address unchanged.
        """
        web = self._web_url
        if web is not None and self._type.is_network_address:
            parts = []
            if not ignore_protocol and web.has_protocol:
                parts.append(web.protocol_notation.lower())
            if web.has_host:
                parts.append((web.main_domain if ignore_subdomain else web.host).lower())
            if web.has_port:
                parts.append(f":{web.port}")
            if web.has_path:
                parts.append(web.path)
            if not ignore_query and web.has_query:
                parts.append(f"?{web.query}")
            if not ignore_fragment and web.has_fragment:
                parts.append(f"#{web.fragment}")
            return "".join(parts)

        if self._file_path is not None and self._type.is_file_based:
            return self._file_path.path_without_protocol.replace("\\", "/").lower()

        return self._address

    @staticmethod
    def decode_url(url: str | None) -> str | None:
        """Percent-decode *url* repeatedly so nested encodings such as
        ``%2520`` collapse, stopping once the text is stable."""
        if not url or not url.strip():
            return url
        decoded = url
        for _ in range(MAX_DECODE_PASSES):
            following = urllib.parse.unquote(decoded)
            if following == decoded:
                break
            decoded = following
        return decoded

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def _identity(self) -> tuple:
        return self._type, self._protocol, self._address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pathment):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return (
            f"Pathment(type={self._type.name}, protocol={self._protocol.name}, "
            f"address={self._address!r}, title={self.title!r})"
        )


_TYPE_LABELS: dict[Type, str] = {
    Type.EMAIL: "EMAIL",
    Type.IP_ADDRESS: "IP",
    Type.HOSTNAME: "HOST",
    Type.EXEC_COMMAND: "CMD",
    Type.PROMPT: "PROMPT",
    Type.UNSPECIFIED: "[TXT]",
}


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def default_sort_key(pathment: Pathment) -> tuple:
    """
    Sort key: type priority bucket (web < email < file < IP/host <
    command/prompt < unspecified), then the display address ignoring case.
    The remaining fields only break ties so the order is total.
    """
    return (
        pathment.type.sort_priority,
        pathment.address_for_display.lower(),
        _TYPE_ORDER[pathment.type],
        _PROTOCOL_ORDER[pathment.protocol],
        pathment.address_for_display,
    )


def sort_pathments(pathments: Iterable[Pathment]) -> list[Pathment]:
    return sorted(pathments, key=default_sort_key)
