"""String helpers shared across the package."""

from pathment_scanner.config import PATH_CONTAINER


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def truncate(text: str, max_length: int) -> str:
    """Cut *text* to at most *max_length* characters."""
    if max_length < 0:
        raise ValueError("max_length must not be negative")
    return text if len(text) <= max_length else text[:max_length]


def text_without_extracted(
    full_text: str,
    extracted: str | None,
    after_only: bool = False,
) -> str:
    """
    Remove *extracted* from *full_text*.

    The extracted string is replaced by the ``{&Path}`` placeholder so the
    caller can still see where it sat.  With *after_only* only the trimmed
    text following the first occurrence is returned.

        text_without_extracted("see a.com now", "a.com")        -> "see {&Path} now"
        text_without_extracted("see a.com now", "a.com", True)  -> "now"
    """
    if extracted is None or full_text == extracted:
        return ""

    text = full_text.replace(extracted, PATH_CONTAINER)
    if not after_only:
        return text.strip()

    index = text.find(PATH_CONTAINER)
    if index == -1:
        return ""
    return text[index + len(PATH_CONTAINER):].strip()
