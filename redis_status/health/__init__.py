"""
Health module for redis-status.

Checks whether a single Redis server is responsive and within its
configured memory threshold.
"""

from __future__ import annotations

from .checker import StatusChecker, check_status_sync
from .connection import RedisConnection, open_connection
from .info import InfoParseError, parse_used_memory

__all__ = [
    "StatusChecker",
    "check_status_sync",
    "RedisConnection",
    "open_connection",
    "InfoParseError",
    "parse_used_memory",
]
