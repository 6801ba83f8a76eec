"""
Per-check Redis connection.

Wraps ``redis.asyncio.Redis`` so that PING and INFO return the server's raw
replies (``"PONG"`` and the INFO text) instead of redis-py's parsed forms.
"""

from __future__ import annotations

from typing import Any, Protocol

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

from redis_status.config import ProbeConfig


def _raw_reply(response: Any, **options: Any) -> Any:
    return response


class Connection(Protocol):
    """What a status check needs from a server connection."""

    async def ping(self) -> Any: ...

    async def info(self, section: str) -> str: ...

    async def close(self) -> None: ...


class RedisConnection:
    """Connection to a single Redis server, owned by one check."""

    def __init__(self, client: aioredis.Redis):
        self._client = client
        self._client.set_response_callback("PING", _raw_reply)
        self._client.set_response_callback("INFO", _raw_reply)

    async def ping(self) -> Any:
        return await self._client.execute_command("PING")

    async def info(self, section: str) -> str:
        return await self._client.execute_command("INFO", section)

    async def close(self) -> None:
        await self._client.aclose()


def open_connection(config: ProbeConfig) -> RedisConnection:
    """
    Create a connection to the server described by ``config``.

    The socket is opened lazily by the first command, so transport errors
    surface from ``ping()`` rather than from here. The connection speaks
    RESP2 (no HELLO handshake) and makes a single attempt per command.
    """
    client = aioredis.Redis(
        host=config.host,
        port=config.port,
        password=config.password,
        decode_responses=True,
        protocol=2,
        retry=Retry(NoBackoff(), 0),
    )
    return RedisConnection(client)
