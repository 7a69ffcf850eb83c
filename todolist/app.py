import flet as ft
import logging

from typing import Any, List

from config import COLORS, Screen
from events import event_bus, AppEvent, Subscription
from ui.app_initializer import AppInitializer
from ui.helpers import ScreenLayout, theme_mode_for

logger = logging.getLogger(__name__)


class TodoApp:
    """Main application class: owns state lifetime and renders the current screen.

    Services and views are built by AppInitializer. The app re-renders the
    whole screen after every navigation, task or theme event.
    """

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.event_bus = event_bus
        self._subscriptions: List[Subscription] = []
        self._started = False

    async def start(self) -> None:
        initializer = AppInitializer(self.page, self.event_bus, self._on_intent_error)
        self._components = await initializer.initialize()
        self._extract_components()

        self._subscribe_to_events()

        self.page.on_close = self._on_page_close
        self.page.on_keyboard_event = self._on_keyboard_event

        self.render()
        self._started = True

        if self.state.load_error:
            self.snack.show(self.state.load_error, COLORS["danger"])

        await self.splash.run()

    def _extract_components(self) -> None:
        c = self._components
        self.services = c.services
        self.state = c.services.state
        self.snack = c.snack
        self.nav = c.nav
        self.intents = c.intents
        self.splash = c.splash
        self._views = {
            Screen.SPLASH: c.splash_view,
            Screen.HOME: c.home_view,
            Screen.ADD: c.add_view,
            Screen.SETTINGS: c.settings_view,
        }

    def _subscribe_to_events(self) -> None:
        """Subscribe to state-change events and track subscriptions for cleanup."""
        for event in (
            AppEvent.NAV_CHANGED,
            AppEvent.TASK_ADDED,
            AppEvent.TASK_TOGGLED,
            AppEvent.TASK_REMOVED,
        ):
            self._subscriptions.append(self.event_bus.subscribe(event, self._on_state_changed))
        self._subscriptions.append(
            self.event_bus.subscribe(AppEvent.THEME_CHANGED, self._on_theme_changed)
        )

    def _unsubscribe_all(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions.clear()

    def render(self) -> None:
        """Install the current screen's layout on the page."""
        layout: ScreenLayout = self._views[self.nav.current].build()
        self.page.appbar = layout.appbar
        self.page.floating_action_button = layout.floating_action_button
        self.page.controls.clear()
        self.page.controls.append(layout.content)
        self.page.update()

    def _on_state_changed(self, data: Any) -> None:
        if self._started:
            self.render()

    def _on_theme_changed(self, is_dark: bool) -> None:
        self.page.theme_mode = theme_mode_for(is_dark)
        self.render()

    def _on_intent_error(self, message: str) -> None:
        # Memory may already hold the change that failed to persist
        self.render()
        self.snack.show(message, COLORS["danger"])

    def _on_keyboard_event(self, e: ft.KeyboardEvent) -> None:
        if e.key == "Escape":
            self.nav.back()

    def _on_page_close(self, e: ft.ControlEvent) -> None:
        """Handle page close - cleanup resources."""
        self._cleanup()

    def _cleanup(self) -> None:
        self._unsubscribe_all()
        if self.intents:
            self.intents.cleanup()

        async def close_store() -> None:
            await self.services.store.close()

        try:
            self.page.run_task(close_store)
        except RuntimeError as e:
            # Page may be closing or event loop unavailable - expected during shutdown
            logger.debug(f"Could not schedule store close (page closing): {e}")
