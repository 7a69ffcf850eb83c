"""Intent handler - turns user intents from the EventBus into service calls.

The flow is:
    Screen -> EventBus (*_REQUESTED) -> IntentHandler -> TaskService / SettingsService
    Service -> EventBus (TASK_* / THEME_CHANGED) -> TodoApp re-render
"""
import logging
from typing import Any, Callable, Coroutine, List

from core import ServiceContainer
from database import DatabaseError
from events import AppEvent, EventBus, Subscription
from i18n import t
from models.entities import Task

logger = logging.getLogger(__name__)

Scheduler = Callable[..., Any]


class IntentHandler:
    """Handles intent events emitted by the screens.

    Service calls are async; they are handed to `schedule` (page.run_task
    in the app) so event emission stays synchronous. Store failures are
    logged and reported through `on_error`; the in-memory change stays.
    """

    def __init__(
        self,
        services: ServiceContainer,
        bus: EventBus,
        schedule: Scheduler,
        on_error: Callable[[str], None],
    ) -> None:
        self._svc = services
        self._bus = bus
        self._schedule = schedule
        self._on_error = on_error
        self._subscriptions: List[Subscription] = []
        self._subscribe()

    def _subscribe(self) -> None:
        self._subscriptions.append(
            self._bus.subscribe(AppEvent.TASK_ADD_REQUESTED, self._on_add)
        )
        self._subscriptions.append(
            self._bus.subscribe(AppEvent.TASK_TOGGLE_REQUESTED, self._on_toggle)
        )
        self._subscriptions.append(
            self._bus.subscribe(AppEvent.TASK_DELETE_REQUESTED, self._on_delete)
        )
        self._subscriptions.append(
            self._bus.subscribe(AppEvent.THEME_CHANGE_REQUESTED, self._on_theme_change)
        )

    def cleanup(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions.clear()

    def _on_add(self, name: str) -> None:
        self._schedule(self.add_task, name)

    def _on_toggle(self, task: Task) -> None:
        self._schedule(self.toggle_task, task)

    def _on_delete(self, task: Task) -> None:
        self._schedule(self.delete_task, task)

    def _on_theme_change(self, is_dark: bool) -> None:
        self._schedule(self.set_theme, is_dark)

    async def _guard(self, action: str, coro: Coroutine) -> None:
        try:
            await coro
        except DatabaseError as e:
            logger.error(f"Could not persist {action}: {e}")
            self._on_error(t("save_failed"))

    async def add_task(self, name: str) -> None:
        await self._guard("new task", self._svc.tasks.add(name))

    async def toggle_task(self, task: Task) -> None:
        await self._guard("task toggle", self._svc.tasks.toggle_done(task))

    async def delete_task(self, task: Task) -> None:
        await self._guard("task removal", self._svc.tasks.remove(task))

    async def set_theme(self, is_dark: bool) -> None:
        await self._guard("theme change", self._svc.settings.set_theme(is_dark))
