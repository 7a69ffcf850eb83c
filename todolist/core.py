"""Headless bootstrap for the to-do services.

Initializes state and services without any Flet dependency, suitable for
scripts and testing.

Usage:
    from core import bootstrap, shutdown

    svc = await bootstrap(db_path=Path("prefs.db"))
    task = await svc.tasks.add("Buy milk")
    await svc.tasks.toggle_done(task)
    await shutdown(svc)
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from database import Database, db
from events import EventBus, event_bus
from i18n import t
from models.entities import AppState
from services.persistence import PersistenceAdapter
from services.settings_service import SettingsService
from services.task_service import TaskService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container holding all initialized services."""
    state: AppState
    store: Database
    persistence: PersistenceAdapter
    tasks: TaskService
    settings: SettingsService


async def load_state(persistence: PersistenceAdapter) -> AppState:
    """Load the theme flag and task list once, at startup.

    An unreadable task list does not stop startup: the raw text is copied
    aside, the app starts empty and AppState.load_error carries a message
    for the user. An unreadable theme flag falls back to light and is
    reported the same way.
    """
    state = AppState()
    errors = []

    theme = await persistence.load_theme()
    if theme.is_corrupt:
        errors.append(t("theme_unreadable"))
    state.is_dark_theme = theme.value

    result = await persistence.load_tasks()
    if result.is_corrupt:
        await persistence.backup_corrupt_tasks(result.raw)
        errors.append(t("tasks_unreadable"))
    state.tasks = list(result.value)
    if errors:
        state.load_error = "\n".join(errors)
    logger.info(
        f"State loaded: {len(state.tasks)} tasks ({result.status.value}), "
        f"dark={state.is_dark_theme}"
    )
    return state


async def bootstrap(
    db_path: Optional[Path] = None,
    bus: EventBus = event_bus,
) -> ServiceContainer:
    """Initialize the service layer.

    Args:
        db_path: Custom store path. Uses the shared store if None.
        bus: Event bus the services emit on.
    """
    store = Database(db_path) if db_path is not None else db
    persistence = PersistenceAdapter(store)
    state = await load_state(persistence)

    return ServiceContainer(
        state=state,
        store=store,
        persistence=persistence,
        tasks=TaskService(state, persistence, bus),
        settings=SettingsService(state, persistence, bus),
    )


async def shutdown(services: ServiceContainer) -> None:
    """Clean up resources (close the store connection)."""
    await services.store.close()
