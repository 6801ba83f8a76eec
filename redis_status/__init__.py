"""
redis-status: health probe for a single Redis server.

Reports whether the server answers PING and, optionally, whether its
memory usage stays under a configured ceiling.
"""

from redis_status.config import ProbeConfig
from redis_status.health import (
    InfoParseError,
    StatusChecker,
    check_status_sync,
)

__version__ = "0.1.0"

__all__ = [
    "ProbeConfig",
    "StatusChecker",
    "InfoParseError",
    "check_status_sync",
]
