import asyncio
import logging
from typing import NoReturn

from aiohttp import web

from social.graze.avatar.app.config import HealthGaugeAppKey

logger = logging.getLogger(__name__)

HEALTH_TICK_INTERVAL = 30


async def tick_health_task(app: web.Application) -> NoReturn:
    """
    Tick the health gauge every 30 seconds, reducing the error count by 1 each time.
    """

    logger.info("Starting health gauge task")

    health_gauge = app[HealthGaugeAppKey]
    while True:
        await health_gauge.tick()
        await asyncio.sleep(HEALTH_TICK_INTERVAL)
