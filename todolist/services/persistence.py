import json
import logging
from typing import List, Sequence

from config import CORRUPT_TASKS_KEY, DARK_THEME_KEY, TASKS_KEY
from database import Database, db as default_db
from models.entities import LoadResult, LoadStatus, Task

logger = logging.getLogger(__name__)


def serialize_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def deserialize_tasks(text: str) -> List[Task]:
    """Parse the stored task list.

    Raises:
        ValueError: If the text is not a JSON list of task records.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Stored tasks must be a list, got {type(data).__name__}")
    return [Task.from_dict(d) for d in data]


def deserialize_theme(text: str) -> bool:
    """Parse the stored theme flag.

    Raises:
        ValueError: If the text is not a JSON boolean.
    """
    value = json.loads(text)
    if not isinstance(value, bool):
        raise ValueError(f"Stored theme flag must be a boolean, got {value!r}")
    return value


class PersistenceAdapter:
    """Reads and writes the task list and the theme flag.

    The task list is always written whole; there are no partial updates.
    """

    def __init__(self, store: Database = default_db) -> None:
        self.store = store

    async def load_tasks(self) -> LoadResult[List[Task]]:
        raw = await self.store.get_value(TASKS_KEY)
        if raw is None:
            return LoadResult(LoadStatus.ABSENT, [])
        try:
            tasks = deserialize_tasks(raw)
        except ValueError as e:
            logger.error(f"Stored task list is unreadable: {e}")
            return LoadResult(LoadStatus.CORRUPT, [], error=str(e), raw=raw)
        logger.debug(f"Loaded {len(tasks)} tasks")
        return LoadResult(LoadStatus.LOADED, tasks)

    async def save_tasks(self, tasks: Sequence[Task]) -> None:
        await self.store.set_value(TASKS_KEY, serialize_tasks(tasks))

    async def backup_corrupt_tasks(self, raw: str) -> None:
        """Keep unreadable task text aside before it gets overwritten."""
        await self.store.set_value(CORRUPT_TASKS_KEY, raw)
        logger.warning(f"Copied unreadable task list to '{CORRUPT_TASKS_KEY}'")

    async def load_theme(self) -> LoadResult[bool]:
        raw = await self.store.get_value(DARK_THEME_KEY)
        if raw is None:
            return LoadResult(LoadStatus.ABSENT, False)
        try:
            value = deserialize_theme(raw)
        except ValueError as e:
            logger.error(f"Stored theme flag is unreadable: {e}")
            return LoadResult(LoadStatus.CORRUPT, False, error=str(e), raw=raw)
        return LoadResult(LoadStatus.LOADED, value)

    async def save_theme(self, is_dark: bool) -> None:
        await self.store.set_setting(DARK_THEME_KEY, bool(is_dark))
