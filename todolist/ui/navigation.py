import logging
from typing import Dict, List, Set

from config import Screen
from events import AppEvent, EventBus, event_bus as default_event_bus

logger = logging.getLogger(__name__)


class NavigationError(ValueError):
    """Raised for a screen transition the app does not allow."""
    pass


# Screens reachable by a forward push from each screen
_PUSH_TARGETS: Dict[Screen, Set[Screen]] = {
    Screen.SPLASH: set(),
    Screen.HOME: {Screen.ADD, Screen.SETTINGS},
    Screen.ADD: set(),
    Screen.SETTINGS: set(),
}


class NavigationManager:
    """Stack-based navigation over the four screens.

    The stack starts at SPLASH. Leaving the splash replaces the whole
    history with HOME, so back from HOME never returns to the splash.
    Every change emits NAV_CHANGED with the new current screen.
    """

    def __init__(self, bus: EventBus = default_event_bus) -> None:
        self.bus = bus
        self._stack: List[Screen] = [Screen.SPLASH]

    @property
    def current(self) -> Screen:
        return self._stack[-1]

    @property
    def history(self) -> List[Screen]:
        return list(self._stack)

    def can_go_back(self) -> bool:
        return len(self._stack) > 1

    def finish_splash(self) -> None:
        """Leave the splash for HOME, clearing the splash from history."""
        if self.current != Screen.SPLASH:
            logger.debug(f"finish_splash ignored on {self.current.value}")
            return
        self._stack = [Screen.HOME]
        self._changed()

    def navigate(self, screen: Screen) -> None:
        """Push a screen reachable from the current one."""
        if screen not in _PUSH_TARGETS[self.current]:
            raise NavigationError(
                f"Cannot navigate from {self.current.value} to {screen.value}"
            )
        self._stack.append(screen)
        self._changed()

    def back(self) -> bool:
        """Pop the current screen. Returns False at the root."""
        if not self.can_go_back():
            return False
        self._stack.pop()
        self._changed()
        return True

    def _changed(self) -> None:
        logger.debug(f"Navigated to {self.current.value} (stack={[s.value for s in self._stack]})")
        self.bus.emit(AppEvent.NAV_CHANGED, self.current)
