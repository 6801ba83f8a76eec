"""
Parsing of ``INFO memory`` replies.

The reply layout is read by fixed position:

    '# Memory\\r\\nused_memory:1086352\\r\\n...'
      -> ['# Memory', 'used_memory:1086352', ...]
      -> 'used_memory:1086352'
      -> ['used_memory', '1086352']
      -> 1086352

A server that puts any other field on the second line yields that field's
number instead. Replace ``parse_used_memory`` with a key lookup if that
matters for a deployment.
"""

from __future__ import annotations

import re

# Leading integer prefix, trailing characters ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class InfoParseError(ValueError):
    """Raised when an INFO reply does not have the expected layout."""

    def __init__(self, message: str, info: str):
        super().__init__(message)
        self.info = info


def parse_int_prefix(text: str) -> int | None:
    """Parse the leading integer of ``text``, or ``None`` if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_used_memory(info: str) -> int:
    """
    Extract ``used_memory`` in bytes from an ``INFO memory`` reply.

    Args:
        info: Raw reply text, lines separated by CRLF

    Returns:
        Used memory in bytes

    Raises:
        InfoParseError: If the second line or its value is missing or
            does not start with an integer
    """
    lines = info.split("\r\n")
    if len(lines) < 2:
        raise InfoParseError("INFO reply has no field line", info)

    segments = lines[1].split(":")
    if len(segments) < 2:
        raise InfoParseError(f"INFO field line has no value: {lines[1]!r}", info)

    used_memory = parse_int_prefix(segments[1])
    if used_memory is None:
        raise InfoParseError(f"INFO value is not an integer: {segments[1]!r}", info)
    return used_memory
