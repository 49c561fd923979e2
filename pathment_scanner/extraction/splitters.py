"""
Structural splitters: raw candidate text -> WebUrl / FilePath.

The splitters never raise.  Text that does not fit the grammar yields
``None`` and the classifier moves on to the next interpretation.
"""

import ipaddress
import re

from pathment_scanner.core.file_path import WINDOWS_SEP, FilePath
from pathment_scanner.core.web_url import WebUrl
from pathment_scanner.protocol import TransferProtocol
from pathment_scanner.utils.log import log

_IPV4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"

IPV4_RE = re.compile(rf"^(?:{_IPV4_OCTET}\.){{3}}{_IPV4_OCTET}$")
EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,16}$")
HOSTNAME_RE = re.compile(r"^([a-zA-Z0-9][a-zA-Z0-9-]{0,61}\.)+[a-zA-Z]{2,24}$")

# protocol? :// host (domain | localhost | IPv4) :port? path? ?query? #fragment?
WEB_URL_SPLIT_RE = re.compile(
    r"^(?:(\w+)://)?"
    rf"((?:(?:[\w-]+\.)+[a-zA-Z]{{2,24}})|localhost|(?:{_IPV4_OCTET}\.){{3}}{_IPV4_OCTET})"
    r"(?::(\d+))?"
    r"(/[^?#]*)?"
    r"(?:\?([^#]*))?"
    r"(?:#(.*))?$",
    re.ASCII,
)

_FILE_SCHEME_RE = re.compile(r"^file:([/\\]*)", re.IGNORECASE)
_DRIVE_PATH_RE = re.compile(r"^[a-zA-Z]:[/\\]")
_DRIVE_ONLY_RE = re.compile(r"^[a-zA-Z]:$")


def is_ipv4(text: str) -> bool:
    return bool(IPV4_RE.match(text))


def is_ipv6(text: str) -> bool:
    """Validated IPv6 literal.  Requires a ``:`` so plain numbers never pass."""
    if ":" not in text:
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_email(text: str) -> bool:
    return bool(EMAIL_RE.match(text))


def is_hostname(text: str) -> bool:
    return bool(HOSTNAME_RE.match(text))


# ---------------------------------------------------------------------------
# Web URLs
# ---------------------------------------------------------------------------

def split_web_url(url: str | None) -> WebUrl | None:
    """
    Decompose *url* into a :class:`WebUrl`.

    A host with at least two dots that is not an IP address has its first
    label split off as the subdomain: ``www.example.co.uk`` becomes
    ``www`` + ``example.co.uk``.  Returns ``None`` when *url* does not match
    the URL grammar or a component is out of range.
    """
    if not url or not url.strip():
        return None

    m = WEB_URL_SPLIT_RE.match(url.strip())
    if not m:
        return None

    scheme, full_host, port_str, path, query, fragment = m.groups()
    try:
        protocol = TransferProtocol.from_scheme(scheme)

        subdomain, domain = "", full_host
        first_dot = full_host.find(".")
        if first_dot != -1 and first_dot != full_host.rfind(".") and not is_ipv4(full_host):
            subdomain, domain = full_host[:first_dot], full_host[first_dot + 1:]

        port = int(port_str) if port_str is not None else -1
        return WebUrl(protocol, subdomain, domain, port, path, query, fragment)
    except (ValueError, IndexError) as exc:
        log.debug("[SPLIT] Cannot split web URL %r: %s", url, exc)
        return None


def validate_and_finalize_web_url(web_url: WebUrl | None, raw_text: str = "") -> bool:
    """
    Final structural gate for a split URL: non-blank host without
    underscores, a port inside ``0..65535`` and, unless the host is an IP
    address or ``localhost``, a well-formed hostname.
    """
    if web_url is None:
        return False
    host = web_url.host
    if not host.strip() or "_" in host:
        return False
    if web_url.port != -1 and not 0 <= web_url.port <= 65535:
        return False
    if host.lower() != "localhost" and not is_ipv4(host) and not is_hostname(host):
        log.debug("[SKIP] Host %r of %r failed hostname validation", host, raw_text)
        return False
    return True


# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------

def split_file_path(file_path: str | None) -> FilePath | None:
    """
    Decompose a local, UNC or ``file:`` path into a :class:`FilePath`.

    ``file:`` prefixes are removed while keeping the root they imply:
    ``file:///home/a`` and ``file:/home/a`` give ``/home/a``,
    ``file://server/share`` keeps its host as ``server/share``.  The last
    ``/`` separates directories from the name, the last dot (not at index 0)
    separates the extension.  Directories of drive-lettered paths use
    backslashes.
    """
    if not file_path or not file_path.strip():
        return None

    path = file_path.strip()
    scheme_found = False

    try:
        m = _FILE_SCHEME_RE.match(path)
        if m:
            scheme_found = True
            slashes = len(m.group(1))
            rest = path[m.end():]
            if _DRIVE_PATH_RE.match(rest) or _DRIVE_ONLY_RE.match(rest) or slashes in (0, 2):
                path = rest
            else:
                path = "/" + rest

        drive = ""
        if _DRIVE_PATH_RE.match(path):
            drive, path = path[:2], path[2:]
        elif _DRIVE_ONLY_RE.match(path):
            drive, path = path, ""

        path = path.replace("\\", "/")
        directories, sep, name = path.rpartition("/")
        directories += sep

        extension = ""
        last_dot = name.rfind(".")
        if last_dot > 0:
            name, extension = name[:last_dot], name[last_dot + 1:]

        if drive:
            directories = directories.replace("/", WINDOWS_SEP)

        return FilePath(scheme_found, drive, directories, name, extension)
    except (ValueError, IndexError) as exc:
        log.debug("[SPLIT] Cannot split file path %r: %s", file_path, exc)
        return None
