import asyncio


class HealthGauge:
    """
    A decaying error counter backing the readiness probe.

    Handlers call ``womp`` when a request fails with an unexpected exception, that is anything other than a
    provider being unable to return an avatar. A background task calls ``tick`` periodically to bring the value
    back towards zero. When a burst of failures pushes the value over the threshold, ``is_healthy`` returns
    false and the readiness endpoint starts answering 503.
    """

    def __init__(self, value: int = 0, health_threshold: int = 100) -> None:
        self._value = value
        self._health_threshold = health_threshold
        self._lock = asyncio.Lock()

    @property
    def value(self) -> int:
        return self._value

    async def womp(self, d=1) -> int:
        async with self._lock:
            self._value += int(d)
            return self._value

    async def tick(self) -> None:
        async with self._lock:
            if self._value > 0:
                self._value -= 1

    async def is_healthy(self) -> bool:
        async with self._lock:
            return self._value <= self._health_threshold
