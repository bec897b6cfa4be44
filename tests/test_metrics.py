"""
Unit Tests for the Metrics Abstraction Layer

Test Coverage:
- MetricsClient interface implementations
- Backend selection via factory function
- Metric name prefixing for the Telegraf backend
"""

import pytest
from unittest.mock import Mock, AsyncMock, patch

from social.graze.avatar.app.metrics import (
    MetricsClient,
    TelegrafMetricsClient,
    NoOpMetricsClient,
    create_metrics_client,
)


class TestMetricsClientInterface:
    """Test the abstract MetricsClient interface."""

    def test_interface_is_abstract(self):
        """MetricsClient should be abstract and not instantiable."""
        with pytest.raises(TypeError):
            MetricsClient()


class TestNoOpMetricsClient:
    """Test the NoOpMetricsClient implementation."""

    @pytest.fixture
    def noop_client(self):
        return NoOpMetricsClient()

    def test_noop_increment(self, noop_client):
        noop_client.increment("lookup.count", 1, {"outcome": "found"})
        noop_client.increment("lookup.count")

    def test_noop_timer(self, noop_client):
        noop_client.timer("server.request.time", 0.01, {"path": "/"})

    @pytest.mark.asyncio
    async def test_noop_connect_and_close(self, noop_client):
        await noop_client.connect()
        await noop_client.close()


class TestTelegrafMetricsClient:
    """Test the TelegrafMetricsClient wrapper."""

    @pytest.fixture
    def mock_telegraf_client(self):
        mock = Mock()
        mock.increment = Mock()
        mock.timer = Mock()
        mock.connect = AsyncMock()
        mock.close = AsyncMock()
        return mock

    def test_increment_is_prefixed(self, mock_telegraf_client):
        client = TelegrafMetricsClient(mock_telegraf_client, prefix="avatar")
        client.increment("lookup.count", 1, {"outcome": "found"})
        mock_telegraf_client.increment.assert_called_once_with(
            "avatar.lookup.count", 1, tag_dict={"outcome": "found"}
        )

    def test_timer_without_tags(self, mock_telegraf_client):
        client = TelegrafMetricsClient(mock_telegraf_client, prefix="avatar")
        client.timer("server.request.time", 0.5)
        mock_telegraf_client.timer.assert_called_once_with(
            "avatar.server.request.time", 0.5, tag_dict={}
        )

    def test_empty_prefix(self, mock_telegraf_client):
        client = TelegrafMetricsClient(mock_telegraf_client, prefix="")
        client.increment("lookup.count")
        mock_telegraf_client.increment.assert_called_once_with(
            "lookup.count", 1, tag_dict={}
        )

    @pytest.mark.asyncio
    async def test_connect_and_close(self, mock_telegraf_client):
        client = TelegrafMetricsClient(mock_telegraf_client)
        await client.connect()
        await client.close()
        mock_telegraf_client.connect.assert_awaited_once()
        mock_telegraf_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_swallows_errors(self, mock_telegraf_client):
        mock_telegraf_client.close.side_effect = OSError("socket closed")
        client = TelegrafMetricsClient(mock_telegraf_client)
        await client.close()


class TestCreateMetricsClient:
    """Test backend selection."""

    def test_none_backend(self):
        assert isinstance(create_metrics_client("none"), NoOpMetricsClient)

    def test_backend_name_is_case_insensitive(self):
        assert isinstance(create_metrics_client("NONE"), NoOpMetricsClient)

    @patch("social.graze.avatar.app.metrics.TelegrafStatsdClient")
    def test_telegraf_backend(self, mock_telegraf_class):
        client = create_metrics_client(
            "telegraf", prefix="avatar", host="telegraf", port=8125
        )
        assert isinstance(client, TelegrafMetricsClient)
        mock_telegraf_class.assert_called_once_with(
            host="telegraf", port=8125, debug=False
        )

    def test_invalid_backend(self):
        with pytest.raises(ValueError, match="Invalid metrics backend"):
            create_metrics_client("prometheus")
