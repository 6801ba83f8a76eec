"""Probe configuration.

A ``ProbeConfig`` is built once and shared, read-only, by every check a
``StatusChecker`` runs.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_ENV_PREFIX = "REDIS_STATUS_"


@dataclass(frozen=True)
class ProbeConfig:
    """Target server and health criteria for one Redis instance.

    Attributes:
        name: Arbitrary display name, used only in failure messages
        host: Host of the Redis server
        port: Port of the Redis server
        password: Optional password; ``None`` disables AUTH
        memory_threshold: Maximum ``used_memory`` in bytes when healthy.
            For an LRU cache use the server's ``maxmemory``; for pub/sub use
            the observed runtime usage (around 10MB). Leave unset for
            autoscaled deployments. Falsy values (including 0) disable the
            memory check.
        timeout: Optional deadline in seconds for each of PING and INFO.
            ``None`` leaves the bound to the transport.
    """

    name: str
    host: str
    port: int
    password: str | None = None
    memory_threshold: int | float | None = None
    timeout: float | None = None

    @property
    def checks_memory(self) -> bool:
        return bool(self.memory_threshold)

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> ProbeConfig:
        """Load configuration from environment variables.

        Args:
            prefix: Prefix for variable names (``<prefix>HOST`` etc.)
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            ProbeConfig instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        def get(key: str) -> str | None:
            value = env.get(prefix + key, "").strip()
            return value or None

        return cls(
            name=get("NAME") or "redis",
            host=get("HOST") or "localhost",
            port=cls._parse_number(prefix + "PORT", get("PORT"), int) or 6379,
            password=get("PASSWORD"),
            memory_threshold=cls._parse_number(
                prefix + "MEMORY_THRESHOLD", get("MEMORY_THRESHOLD"), int
            ),
            timeout=cls._parse_number(prefix + "TIMEOUT", get("TIMEOUT"), float),
        )

    @staticmethod
    def _parse_number(key, value, kind):
        if value is None:
            return None
        try:
            return kind(value)
        except ValueError:
            raise ValueError(f"{key} must be a number, got {value!r}") from None
