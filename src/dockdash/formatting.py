"""
Formatting helpers shared by list rows and the detail panel.

All functions are pure and operate on plain strings/numbers:
  - short_id / strip_sha256 / shorten_id: Docker identifier shortening
  - trim_to: truncation with a trailing "..."
  - join_kv: label/option maps rendered as "k=v, k=v"
  - format_size_mb: byte counts rendered as "%.1fMB" (base 1024)
"""

from typing import Mapping, Optional

SHA256_PREFIX = "sha256:"
SHORT_ID_LENGTH = 12
ELLIPSIS = "..."
EMPTY_VALUE = "-"


def short_id(identifier: str) -> str:
    """Return the first 12 characters of an identifier."""
    if len(identifier) > SHORT_ID_LENGTH:
        return identifier[:SHORT_ID_LENGTH]
    return identifier


def strip_sha256(identifier: str) -> str:
    if identifier.startswith(SHA256_PREFIX):
        return identifier[len(SHA256_PREFIX):]
    return identifier


def shorten_id(identifier: str) -> str:
    """Short identifier: content-hash prefix removed, then cut to 12 chars."""
    return short_id(strip_sha256(identifier))


def trim_to(text: str, limit: int) -> str:
    """
    Trim text to at most `limit` characters, marking the cut with "...".

    Strings that already fit, and limits of 3 or less, are returned unchanged.
    """
    if limit <= len(ELLIPSIS) or len(text) <= limit:
        return text
    return text[:limit - len(ELLIPSIS)] + ELLIPSIS


def join_kv(mapping: Optional[Mapping[str, str]]) -> str:
    if not mapping:
        return EMPTY_VALUE
    return ", ".join(f"{key}={value}" for key, value in mapping.items())


def join_or_dash(values) -> str:
    values = list(values)
    if not values:
        return EMPTY_VALUE
    return ", ".join(values)


def format_size_mb(size_bytes: float) -> str:
    return f"{size_bytes / 1024.0 / 1024.0:.1f}MB"
