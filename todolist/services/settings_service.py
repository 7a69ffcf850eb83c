import logging

from events import AppEvent, EventBus, event_bus as default_event_bus
from models.entities import AppState
from services.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for application settings.

    Only the theme flag is persisted; it is written on every change.
    """

    def __init__(
        self,
        state: AppState,
        persistence: PersistenceAdapter,
        bus: EventBus = default_event_bus,
    ) -> None:
        self.state = state
        self.persistence = persistence
        self.bus = bus

    async def set_theme(self, is_dark: bool) -> None:
        self.state.is_dark_theme = bool(is_dark)
        await self.persistence.save_theme(self.state.is_dark_theme)
        logger.info(f"Dark theme {'on' if self.state.is_dark_theme else 'off'}")
        self.bus.emit(AppEvent.THEME_CHANGED, self.state.is_dark_theme)
