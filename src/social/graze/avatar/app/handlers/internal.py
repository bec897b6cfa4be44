import logging
from aiohttp import web

from social.graze.avatar.app.config import HealthGaugeAppKey

logger = logging.getLogger(__name__)


async def handle_internal_ready(request: web.Request):
    health_gauge = request.app[HealthGaugeAppKey]
    if await health_gauge.is_healthy():
        return web.Response(status=200)
    logger.warning("Readiness check failed, health gauge at %s", health_gauge.value)
    return web.Response(status=503)


async def handle_internal_alive(request: web.Request):
    return web.Response(status=200)
