"""Display text sanitization.

Nicknames and commentary come straight from the livestream audience.
Everything shown on the overlay passes through sanitize_text first.
"""

import re

# Control chars to strip (keep \t=0x09, \n=0x0a, \r=0x0d)
_CONTROL_RE = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]"
)

# Zero-width and BOM characters
_ZERO_WIDTH_RE = re.compile(
    r"[\u200b\u200c\u200d\u2060\ufeff\u00ad]"
)

_WHITESPACE_RUN_RE = re.compile(r"\s+")

MAX_NAME_LENGTH = 32


def sanitize_text(text: str) -> str:
    """Strip control characters and zero-width chars. Preserves normal unicode."""
    text = _CONTROL_RE.sub("", text)
    text = _ZERO_WIDTH_RE.sub("", text)
    return text


def sanitize_name(name: str | None, max_len: int = MAX_NAME_LENGTH) -> str:
    """Single-line, trimmed nickname. Empty after cleaning → ''."""
    if not name:
        return ""
    name = _WHITESPACE_RUN_RE.sub(" ", sanitize_text(name)).strip()
    if len(name) > max_len:
        name = name[: max_len - 1] + "…"
    return name
