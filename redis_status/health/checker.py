"""
Health check for a single Redis server.

A server is healthy if:
- it answers PING with PONG;
- and, when a memory threshold is configured, the ``used_memory`` it reports
  in ``INFO memory`` does not exceed that threshold.

Every check opens its own connection and closes it before returning, so one
``StatusChecker`` can run any number of checks, sequentially or concurrently.

Example:
    from redis_status import ProbeConfig, StatusChecker

    checker = StatusChecker(
        ProbeConfig(name="cache1", host="localhost", port=6379,
                    memory_threshold=512 * 1024**2)
    )

    reason = await checker.check_status()
    if reason:
        print(f"Unhealthy: {reason}")
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from redis.exceptions import RedisError

from redis_status.config import ProbeConfig
from redis_status.health.connection import Connection, open_connection
from redis_status.health.info import parse_used_memory

logger = structlog.get_logger(__name__)

T = TypeVar("T")

NOT_RESPONSIVE = "{name} instance is not responsive."
HIGH_MEMORY = "{name} instance is using abnormally high memory."

# Failures reported as "not responsive" instead of raised.
TRANSPORT_ERRORS = (RedisError, OSError, asyncio.TimeoutError)


class StatusChecker:
    """
    Checks the status of one Redis server.

    Example:
        checker = StatusChecker(ProbeConfig(name="pubsub1", host="redis", port=6379))
        reason = await checker.check_status()
    """

    def __init__(
        self,
        config: ProbeConfig,
        connect: Callable[[ProbeConfig], Connection] | None = None,
    ):
        """
        Initialize the status checker.

        Args:
            config: Target server and thresholds
            connect: Factory returning a new connection for each check
                (defaults to ``open_connection``)
        """
        self.config = config
        self._connect = connect or open_connection

    async def check_status(self) -> str | None:
        """
        Check the status of the Redis server.

        Returns:
            None if the server is healthy, otherwise a description of
            why it is not

        Raises:
            InfoParseError: If the server's INFO reply is malformed
        """
        log = logger.bind(
            instance=self.config.name, host=self.config.host, port=self.config.port
        )
        log.debug("redis_status_check_started")

        connection = self._connect(self.config)
        try:
            return await self._probe(connection, log)
        finally:
            await self._close(connection, log)

    async def _probe(self, connection: Connection, log: Any) -> str | None:
        try:
            pong = await self._bounded(connection.ping())
        except TRANSPORT_ERRORS as e:
            log.warning("redis_ping_failed", error=str(e) or type(e).__name__)
            return NOT_RESPONSIVE.format(name=self.config.name)

        if pong != "PONG":
            log.warning("redis_ping_failed", reply=pong)
            return NOT_RESPONSIVE.format(name=self.config.name)

        if not self.config.checks_memory:
            log.debug("redis_status_healthy")
            return None

        try:
            info = await self._bounded(connection.info("memory"))
        except TRANSPORT_ERRORS as e:
            log.warning("redis_info_failed", error=str(e) or type(e).__name__)
            return NOT_RESPONSIVE.format(name=self.config.name)

        used_memory = parse_used_memory(info)
        if used_memory > self.config.memory_threshold:
            log.warning(
                "redis_memory_above_threshold",
                used_memory=used_memory,
                memory_threshold=self.config.memory_threshold,
            )
            return HIGH_MEMORY.format(name=self.config.name)

        log.debug("redis_status_healthy", used_memory=used_memory)
        return None

    async def _bounded(self, awaitable: Awaitable[T]) -> T:
        if self.config.timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, self.config.timeout)

    @staticmethod
    async def _close(connection: Connection, log: Any) -> None:
        # The result is already decided; errors from here on are dropped.
        try:
            await connection.close()
        except TRANSPORT_ERRORS as e:
            log.debug("redis_close_failed", error=str(e) or type(e).__name__)


def check_status_sync(config: ProbeConfig) -> str | None:
    """
    Synchronous wrapper for ``StatusChecker.check_status``.

    Args:
        config: Target server and thresholds

    Returns:
        None if healthy, otherwise the reason
    """
    return asyncio.run(StatusChecker(config).check_status())
