"""
Decomposed web URL.

A :class:`WebUrl` keeps the parts of a URL exactly as they were found in the
pasted text (path, query and fragment are *not* percent-decoded or encoded)
and can rebuild two serialisations from them:

* :meth:`WebUrl.to_uri_string` – percent-encoded, for open/network actions
* :attr:`WebUrl.display_url` – the raw components joined back together,
  for showing to a user
"""

from __future__ import annotations

import dataclasses
import urllib.parse
from dataclasses import dataclass

from pathment_scanner.protocol import TransferProtocol

# RFC 3986 sub-delims, ':' and '@' stay literal; '%' too so already-encoded
# input is not encoded twice.
_PATH_SAFE = "/:@!$&'()*+,;=-._~%"
_QUERY_SAFE = _PATH_SAFE + "?"


@dataclass(frozen=True)
class WebUrl:
    """Immutable decomposition of a web URL.

    ``port`` is ``-1`` when absent.  String components are stored stripped,
    with ``""`` meaning "not present".  A host exists iff ``main_domain`` is
    non-blank; ``subdomain`` is only meaningful next to it.
    """

    protocol: TransferProtocol = TransferProtocol.NONE
    subdomain: str = ""
    main_domain: str = ""
    port: int = -1
    path: str = ""
    query: str = ""
    fragment: str = ""

    def __post_init__(self) -> None:
        for name in ("subdomain", "main_domain", "path", "query", "fragment"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())
        if self.protocol is None:
            object.__setattr__(self, "protocol", TransferProtocol.NONE)
        if not -1 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")

    # ------------------------------------------------------------------
    # Component checks
    # ------------------------------------------------------------------

    @property
    def has_protocol(self) -> bool:
        return self.protocol is not TransferProtocol.NONE and self.protocol.has_notation

    @property
    def protocol_notation(self) -> str:
        return self.protocol.notation if self.has_protocol else ""

    @property
    def has_host(self) -> bool:
        return bool(self.main_domain)

    @property
    def has_subdomain(self) -> bool:
        return bool(self.subdomain)

    @property
    def has_port(self) -> bool:
        return self.port != -1

    @property
    def has_path(self) -> bool:
        return bool(self.path)

    @property
    def has_query(self) -> bool:
        return bool(self.query)

    @property
    def has_fragment(self) -> bool:
        return bool(self.fragment)

    @property
    def host(self) -> str:
        """Full host, e.g. ``www.example.com``; ``""`` without a main domain."""
        if not self.has_host:
            return ""
        if self.has_subdomain:
            sep = "" if self.subdomain.endswith(".") else "."
            return f"{self.subdomain}{sep}{self.main_domain}"
        return self.main_domain

    # ------------------------------------------------------------------
    # Serialisations
    # ------------------------------------------------------------------

    def to_uri_string(self) -> str:
        """
        Percent-encoded URI string including the scheme.

        Raises ``ValueError`` when a scheme is present but no host is.
        """
        return self._assemble_uri(include_protocol=True)

    def to_uri_string_without_protocol(self) -> str:
        return self._assemble_uri(include_protocol=False)

    @property
    def display_url(self) -> str:
        """Human-readable URL including the protocol notation."""
        return self._assemble_display(include_protocol=True)

    @property
    def display_url_without_protocol(self) -> str:
        return self._assemble_display(include_protocol=False)

    def _assemble_uri(self, include_protocol: bool) -> str:
        scheme = ""
        if include_protocol and self.protocol.is_url_based:
            scheme = self.protocol.scheme
        if scheme and not self.has_host:
            raise ValueError(
                f"host is mandatory when a scheme ('{scheme}') is present: {self!r}"
            )

        parts = [f"{scheme}://" if scheme else "", self.host]
        if self.has_port:
            parts.append(f":{self.port}")
        if self.has_path:
            path = self.path if self.path.startswith("/") else "/" + self.path
            parts.append(urllib.parse.quote(path, safe=_PATH_SAFE))
        if self.has_query:
            parts.append("?" + urllib.parse.quote(self.query, safe=_QUERY_SAFE))
        if self.has_fragment:
            parts.append("#" + urllib.parse.quote(self.fragment, safe=_QUERY_SAFE))
        return "".join(parts)

    def _assemble_display(self, include_protocol: bool) -> str:
        parts = []
        if include_protocol and self.has_protocol:
            parts.append(self.protocol_notation)

        host = self.host
        parts.append(host)
        if self.has_port:
            parts.append(f":{self.port}")
        if self.has_path:
            if host and not self.path.startswith("/"):
                parts.append("/")
            parts.append(self.path)
        if self.has_query:
            parts.append(f"?{self.query}")
        if self.has_fragment:
            parts.append(f"#{self.fragment}")
        return "".join(parts)

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------

    def path_looks_like_directory(self) -> bool:
        """
        Guess whether the path names a directory: empty, ``/``, a trailing
        slash, or a last segment without a dot.

            /galleries/funny-boats  -> True
            /assets/style.css       -> False
        """
        path = self.path
        if not path or path == "/" or path.endswith("/"):
            return True
        return "." not in path.rsplit("/", 1)[-1]

    def domain_name(self) -> str | None:
        """First label of the main domain (``google`` for ``google.com``,
        ``co`` for ``bbc.co.uk``)."""
        if not self.has_host:
            return None
        return self.main_domain.split(".")[0]

    def top_level_domain(self) -> str | None:
        if not self.has_host:
            return None
        last_dot = self.main_domain.rfind(".")
        if 0 < last_dot < len(self.main_domain) - 1:
            return self.main_domain[last_dot + 1:]
        return None

    def is_host_structurally_valid(self) -> bool:
        """Loose structural check (non-blank host containing a dot), for
        logging and debugging rather than validation."""
        return "." in self.host

    def with_protocol(self, protocol: TransferProtocol) -> WebUrl:
        return dataclasses.replace(self, protocol=protocol)
