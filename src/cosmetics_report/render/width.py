from __future__ import annotations

from wcwidth import wcswidth, wcwidth


def _utf8(value: str | bytes) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    # surrogateescape restores smuggled raw bytes; other lone surrogates
    # are encoded as-is so malformed text is counted, never rejected
    try:
        return value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", "surrogatepass")


def display_width(value: str | bytes) -> int:
    """
    Count the columns a UTF-8 value occupies by counting lead bytes.

    Every byte that is not a continuation byte (10xxxxxx) counts as one
    position, so a code point is one column no matter how many bytes it
    takes. Wide glyphs (CJK, emoji) still count as 1. Malformed sequences
    are counted, never rejected.
    """
    return sum(1 for b in _utf8(value) if (b & 0xC0) != 0x80)


def terminal_width(value: str | bytes) -> int:
    """East-Asian-width-aware measure; double-width glyphs count as 2."""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", "replace")

    w = wcswidth(value)
    if w >= 0:
        return w

    # wcswidth gives -1 for control characters; treat those as zero-width
    return sum(max(0, wcwidth(ch)) for ch in value)
