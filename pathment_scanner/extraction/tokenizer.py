"""
Master tokenizer and candidate cleaner.

The tokenizer walks the text once.  At every scan position the match that
starts leftmost wins; when several matchers start at the same position the
one listed first in :data:`MATCHERS` wins.  Scanning resumes after the end of
the accepted match, so text inside a URL is never re-read as a hostname.
"""

import re
from typing import Iterator, NamedTuple


class Matcher(NamedTuple):
    name: str
    pattern: re.Pattern


class Token(NamedTuple):
    """One raw candidate together with the matcher that produced it."""
    matcher: str
    text: str
    start: int
    end: int


_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"

# Priority order: earlier entries win ties at the same start position.
MATCHERS: tuple[Matcher, ...] = tuple(
    Matcher(name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        # http(s) / ftp / file URLs
        ("url", r"""\b(?:https?://|ftp://|file://)[^\s,;<>"']+"""),
        ("email", r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,16}\b"),
        # C:\dir\file.ext or \\server\share\file.ext; inner segments may hold
        # spaces, the last one may not.
        ("windows_path",
         r"""(?:\b[A-Za-z]:|(?<![\w\\])\\\\[^\\/\s]+)"""
         r"""(?:\\[^\\/:*?"<>|\r\n,;]+)*"""
         r"""\\[^\\/:*?"<>|\s,;]+"""
         r"""(?:\.[a-zA-Z0-9]{1,10})?"""
         r"""(?=[\s,;<>"?:|]|$)"""),
        ("www", r"""\bwww\.[^\s,;<>"']+"""),
        # /abs/file.ext, ./rel/file.ext, ../rel/file.ext
        ("unix_path", r"(?<![\w/.])(?:\.{1,2})?/(?:[^/\s]+/)*[^/\s]+\.[^/\s.]+"),
        ("ip", rf"\b(?:{_OCTET}\.){{3}}{_OCTET}\b|\blocalhost\b"),
        ("hostname", r"\b(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,24}\b"),
    )
)

_SENTENCE_BREAK_RE = re.compile(r"[.,;]\s+")
_TRAILING_PUNCT_RE = re.compile(r"[.,;\s]+$")


def iter_tokens(text: str | None) -> Iterator[Token]:
    """Lazily yield every candidate :class:`Token` in *text*, left to right."""
    if not text:
        return

    pending: list[re.Match | None] = [m.pattern.search(text) for m in MATCHERS]
    pos = 0
    while True:
        # Re-search only matchers whose cached hit lies behind the cursor.
        for i, found in enumerate(pending):
            if found is not None and found.start() < pos:
                pending[i] = MATCHERS[i].pattern.search(text, pos)

        best_index, best = -1, None
        for i, found in enumerate(pending):
            if found is not None and (best is None or found.start() < best.start()):
                best_index, best = i, found
        if best is None:
            return

        yield Token(MATCHERS[best_index].name, best.group(0), best.start(), best.end())
        pos = best.end() if best.end() > best.start() else best.start() + 1


def tokenize(text: str | None) -> list[Token]:
    return list(iter_tokens(text))


def iter_candidates(text: str | None) -> Iterator[str]:
    """Raw candidate substrings of *text*, uncleaned."""
    for token in iter_tokens(text):
        yield token.text


def clean_candidate(raw: str | None) -> str:
    """
    Separate a candidate from trailing prose.

        "google.com, and then"      -> "google.com"
        "https://x.org/a."          -> "https://x.org/a"
        "https://x.org/a)."         -> "https://x.org/a"
        "https://x.org/Foo_(bar)"   -> unchanged
    """
    if raw is None:
        return ""
    candidate = _SENTENCE_BREAK_RE.split(raw.strip(), maxsplit=1)[0]
    candidate = _TRAILING_PUNCT_RE.sub("", candidate)
    # closing parens of surrounding prose
    while candidate.endswith(")") and candidate.count(")") > candidate.count("("):
        candidate = _TRAILING_PUNCT_RE.sub("", candidate[:-1])
    return candidate
