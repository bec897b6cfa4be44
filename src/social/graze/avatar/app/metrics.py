"""
Metrics Abstraction Layer for the Avatar Service

This module provides a small metrics interface with two backends: Telegraf/StatsD
through aio-statsd, and a no-op client for when metrics are disabled.

Key Components:
- MetricsClient: Abstract interface for all metrics operations
- TelegrafMetricsClient: Wrapper around TelegrafStatsdClient
- NoOpMetricsClient: No-operation client for disabled metrics
- create_metrics_client: Factory function for backend selection
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Union

from aio_statsd import TelegrafStatsdClient

logger = logging.getLogger(__name__)


class MetricsClient(ABC):
    """
    Abstract metrics client interface.

    Tags are passed as StatsD style dictionaries and forwarded to the backend as-is.
    """

    @abstractmethod
    def increment(
        self,
        name: str,
        value: Union[int, float] = 1,
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Increment a counter metric by the specified value.

        Args:
            name: Metric name without prefix (e.g., 'lookup.count')
            value: Amount to increment by (default: 1)
            tag_dict: Optional tags for metric dimensions
        """
        pass

    @abstractmethod
    def timer(
        self,
        name: str,
        value: Union[int, float],
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a duration in seconds.

        Args:
            name: Metric name without prefix (e.g., 'server.request.time')
            value: Duration in seconds
            tag_dict: Optional tags for metric dimensions
        """
        pass

    async def connect(self) -> None:
        """Open any connection the backend needs."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Flush pending metrics and close the backend connection."""
        pass


class TelegrafMetricsClient(MetricsClient):
    """
    Metrics client sending to Telegraf over the StatsD protocol.

    Every metric name is prefixed with ``prefix`` followed by a dot.
    """

    def __init__(self, telegraf_client: TelegrafStatsdClient, prefix: str = "avatar"):
        self.client = telegraf_client
        self.prefix = prefix

    def _name(self, name: str) -> str:
        if not self.prefix:
            return name
        return f"{self.prefix}.{name}"

    def increment(
        self,
        name: str,
        value: Union[int, float] = 1,
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        self.client.increment(self._name(name), value, tag_dict=tag_dict or {})

    def timer(
        self,
        name: str,
        value: Union[int, float],
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        self.client.timer(self._name(name), value, tag_dict=tag_dict or {})

    async def connect(self) -> None:
        await self.client.connect()

    async def close(self) -> None:
        try:
            await self.client.close()
        except Exception as e:
            logger.warning(f"Error closing Telegraf client: {e}")


class NoOpMetricsClient(MetricsClient):
    """
    No-operation metrics client, used in development and tests.
    """

    def increment(
        self,
        name: str,
        value: Union[int, float] = 1,
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        pass

    def timer(
        self,
        name: str,
        value: Union[int, float],
        tag_dict: Optional[Dict[str, Any]] = None
    ) -> None:
        pass

    async def close(self) -> None:
        pass


def create_metrics_client(
    backend: str,
    prefix: str = "avatar",
    host: str = "localhost",
    port: int = 8125,
    debug: bool = False,
) -> MetricsClient:
    """
    Create the metrics client for a backend name.

    Args:
        backend: Backend type ('telegraf' or 'none')
        prefix: Metric name prefix for the telegraf backend
        host: Telegraf/StatsD host
        port: Telegraf/StatsD port
        debug: Enable aio-statsd debug logging

    Returns:
        MetricsClient: Configured metrics client instance

    Raises:
        ValueError: If backend type is invalid
    """
    backend = backend.lower()

    if backend == "telegraf":
        telegraf_client = TelegrafStatsdClient(host=host, port=port, debug=debug)
        return TelegrafMetricsClient(telegraf_client, prefix=prefix)

    elif backend == "none":
        logger.info("Metrics collection disabled (no-op client)")
        return NoOpMetricsClient()

    raise ValueError(
        f"Invalid metrics backend: {backend}. "
        f"Supported backends: 'telegraf', 'none'"
    )
