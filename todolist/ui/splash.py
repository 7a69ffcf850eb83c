import asyncio
import logging
from typing import Awaitable, Callable

from config import SPLASH_ANIMATION_MS, SPLASH_PAUSE_MS, SPLASH_TARGET_SCALE
from ui.navigation import NavigationManager

logger = logging.getLogger(__name__)


class SplashSequence:
    """Timed splash: grow the logo, pause, then move on to HOME.

    The sequence is not cancelable and finishes at most once.
    """

    def __init__(
        self,
        nav: NavigationManager,
        set_scale: Callable[[float], None],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        animation_ms: int = SPLASH_ANIMATION_MS,
        pause_ms: int = SPLASH_PAUSE_MS,
    ) -> None:
        self.nav = nav
        self._set_scale = set_scale
        self._sleep = sleep
        self.animation_ms = animation_ms
        self.pause_ms = pause_ms
        self._started = False

    @property
    def total_ms(self) -> int:
        return self.animation_ms + self.pause_ms

    async def run(self) -> None:
        if self._started:
            return
        self._started = True
        self._set_scale(SPLASH_TARGET_SCALE)
        await self._sleep(self.animation_ms / 1000)
        await self._sleep(self.pause_ms / 1000)
        logger.debug(f"Splash finished after {self.total_ms} ms")
        self.nav.finish_splash()
