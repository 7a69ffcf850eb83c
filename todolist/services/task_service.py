import logging
import time
from typing import Callable, Iterable, Optional

from events import AppEvent, EventBus, event_bus as default_event_bus
from models.entities import AppState, Task
from services.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


def is_blank_task_name(text: Optional[str]) -> bool:
    """True for missing or whitespace-only input. Non-blank text is stored as typed."""
    return text is None or not text.strip()


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskIdGenerator:
    """Issues strictly increasing integer ids.

    Ids follow the wall clock in milliseconds but never repeat, even for
    tasks created within the same millisecond.
    """

    def __init__(self, existing_ids: Iterable[int] = (), clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = max(existing_ids, default=0)

    def next_id(self) -> int:
        self._last = max(self._last + 1, self._clock())
        return self._last


class TaskService:
    """Owns the in-memory task list.

    Every mutation updates AppState.tasks, rewrites the whole stored list
    and then emits an event so the UI can re-render.
    """

    def __init__(
        self,
        state: AppState,
        persistence: PersistenceAdapter,
        bus: EventBus = default_event_bus,
        ids: Optional[TaskIdGenerator] = None,
    ) -> None:
        self.state = state
        self.persistence = persistence
        self.bus = bus
        self.ids = ids or TaskIdGenerator(t.id for t in state.tasks)

    async def add(self, name: str) -> Task:
        """Append a new pending task. Name validation is the caller's job."""
        task = Task(id=self.ids.next_id(), name=name)
        self.state.tasks = self.state.tasks + [task]
        await self.persistence.save_tasks(self.state.tasks)
        logger.info(f"Added task {task.id}")
        self.bus.emit(AppEvent.TASK_ADDED, task)
        return task

    async def remove(self, task: Task) -> bool:
        """Remove the first task equal to the given one. Returns False if none matched."""
        try:
            index = self.state.tasks.index(task)
        except ValueError:
            logger.debug(f"Task {task.id} not in list, nothing to remove")
            return False
        self.state.tasks = self.state.tasks[:index] + self.state.tasks[index + 1:]
        await self.persistence.save_tasks(self.state.tasks)
        logger.info(f"Removed task {task.id}")
        self.bus.emit(AppEvent.TASK_REMOVED, task)
        return True

    async def toggle_done(self, task: Task) -> Optional[Task]:
        """Flip is_done on the task with the same id. Returns the new record."""
        toggled = None
        updated = []
        for t in self.state.tasks:
            if toggled is None and t.id == task.id:
                toggled = t.toggled()
                updated.append(toggled)
            else:
                updated.append(t)
        if toggled is None:
            logger.debug(f"Task {task.id} not in list, nothing to toggle")
            return None
        self.state.tasks = updated
        await self.persistence.save_tasks(self.state.tasks)
        logger.info(f"Task {toggled.id} is_done={toggled.is_done}")
        self.bus.emit(AppEvent.TASK_TOGGLED, toggled)
        return toggled
