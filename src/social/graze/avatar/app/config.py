"""
Configuration Module for the Avatar Service

This module defines the configuration system for the avatar service, using Pydantic
for settings validation and dependency injection through AppKeys.

The Settings class is loaded from environment variables with defaults that work for
local development. Application components access settings and shared resources
(the outbound HTTP session, the metrics client, the health gauge) through typed
AppKeys stored on the aiohttp application.

Key configuration areas include:
- Networking and service identification
- Provider endpoints
- Monitoring and error reporting
"""

import asyncio
from typing import Final, Literal, Optional
import logging
from pydantic import Field
from pydantic_settings import BaseSettings
from aiohttp import web
from aiohttp import ClientSession

from social.graze.avatar.app.metrics import MetricsClient
from social.graze.avatar.model.health import HealthGauge


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings for the avatar service.

    Environment variables are mapped to fields automatically, for example the
    Mastodon instance is read from MASTODON_HOSTNAME.
    """

    debug: bool = False
    """
    Enable debug mode for verbose logging and outbound request tracing.
    Set with DEBUG=true environment variable.
    """

    http_port: int = Field(alias="port", default=3000)
    """
    HTTP port for the service to listen on.
    Set with PORT environment variable.
    """

    server_header: str = "avatar"
    """
    Value sent in the Server response header in place of the server software banner.
    Set with SERVER_HEADER environment variable.
    """

    user_agent: str = "graze-avatar/1.0"
    """
    User-Agent sent to GitHub and Mastodon. GitHub rejects requests without one.
    Set with USER_AGENT environment variable.
    """

    # Provider endpoints
    github_api_hostname: str = "api.github.com"
    """
    Hostname of the GitHub REST API.
    Set with GITHUB_API_HOSTNAME environment variable.
    """

    mastodon_hostname: str = "mastodon.social"
    """
    The single Mastodon instance used for account lookups.
    Set with MASTODON_HOSTNAME environment variable.
    """

    gravatar_hostname: str = "gravatar.com"
    """
    Hostname used when building Gravatar image URLs.
    Set with GRAVATAR_HOSTNAME environment variable.
    """

    gravatar_size: int = 400
    """
    Gravatar image size in pixels, sent as the s= query parameter.
    Set with GRAVATAR_SIZE environment variable.
    """

    # Monitoring and error reporting
    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    metrics_backend: Literal["telegraf", "none"] = "none"
    """
    Metrics backend, either telegraf or none.
    Set with METRICS_BACKEND environment variable.
    """

    statsd_host: str = Field(alias="TELEGRAF_HOST", default="telegraf")
    """
    StatsD/Telegraf host for metrics collection.
    Set with TELEGRAF_HOST environment variable.
    """

    statsd_port: int = Field(alias="TELEGRAF_PORT", default=8125)
    """
    StatsD/Telegraf port for metrics collection.
    Set with TELEGRAF_PORT environment variable.
    """

    statsd_prefix: str = "avatar"
    """
    Prefix for all metric names emitted by this service.
    Set with STATSD_PREFIX environment variable.
    """

    health_threshold: int = 100
    """
    Number of outstanding unexpected errors tolerated before readiness fails.
    Set with HEALTH_THRESHOLD environment variable.
    """


# Application context keys for dependency injection
SettingsAppKey: Final = web.AppKey("settings", Settings)
"""AppKey for accessing the application settings"""

SessionAppKey: Final = web.AppKey("http_session", ClientSession)
"""AppKey for accessing the shared aiohttp client session"""

HealthGaugeAppKey: Final = web.AppKey("health_gauge", HealthGauge)
"""AppKey for accessing the health monitoring gauge"""

TickHealthTaskAppKey: Final = web.AppKey("tick_health_task", asyncio.Task[None])
"""AppKey for the background task that decays the health gauge"""

MetricsClientAppKey: Final = web.AppKey("metrics_client", MetricsClient)
"""AppKey for the metrics client"""
