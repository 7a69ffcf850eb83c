import flet as ft
import logging
from typing import Callable, Optional

from config import APP_TITLE
from core import ServiceContainer, bootstrap
from events import EventBus
from ui.handlers import IntentHandler
from ui.helpers import SnackService, build_theme, theme_mode_for
from ui.navigation import NavigationManager
from ui.pages import AddView, HomeView, SettingsView, SplashView
from ui.splash import SplashSequence

logger = logging.getLogger(__name__)


class AppComponents:
    """Container for initialized application components."""

    def __init__(self) -> None:
        self.services: Optional[ServiceContainer] = None
        self.snack: Optional[SnackService] = None
        self.nav: Optional[NavigationManager] = None
        self.intents: Optional[IntentHandler] = None
        self.splash: Optional[SplashSequence] = None

        # Screens
        self.splash_view: Optional[SplashView] = None
        self.home_view: Optional[HomeView] = None
        self.add_view: Optional[AddView] = None
        self.settings_view: Optional[SettingsView] = None


class AppInitializer:
    """Handles application setup and component wiring."""

    def __init__(
        self,
        page: ft.Page,
        bus: EventBus,
        on_intent_error: Callable[[str], None],
    ) -> None:
        self.page = page
        self.bus = bus
        self._on_intent_error = on_intent_error
        self.components = AppComponents()

    async def initialize(self) -> AppComponents:
        """Load state and build every component, in dependency order."""
        await self._init_services()
        self._setup_page()
        self._init_navigation()
        self._init_views()
        self._init_intents()
        return self.components

    async def _init_services(self) -> None:
        self.components.services = await bootstrap(bus=self.bus)

    def _setup_page(self) -> None:
        """Configure the Flet page settings."""
        self.page.title = APP_TITLE
        self.page.theme = build_theme()
        self.page.dark_theme = build_theme()
        self.page.theme_mode = theme_mode_for(self.components.services.state.is_dark_theme)
        self.components.snack = SnackService(self.page)

    def _init_navigation(self) -> None:
        self.components.nav = NavigationManager(self.bus)

    def _init_views(self) -> None:
        c = self.components
        state = c.services.state
        c.splash_view = SplashView(self.page)
        c.home_view = HomeView(state, c.nav, self.bus)
        c.add_view = AddView(c.nav, self.bus)
        c.settings_view = SettingsView(state, c.nav, self.bus)
        c.splash = SplashSequence(c.nav, c.splash_view.set_scale)

    def _init_intents(self) -> None:
        self.components.intents = IntentHandler(
            self.components.services,
            self.bus,
            schedule=self.page.run_task,
            on_error=self._on_intent_error,
        )
