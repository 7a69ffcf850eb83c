from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Task:
    """A single to-do item. Records are replaced, never mutated in place."""
    id: int
    name: str
    is_done: bool = False

    def toggled(self) -> "Task":
        """Return a copy with is_done flipped."""
        return replace(self, is_done=not self.is_done)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the stored JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "isDone": self.is_done,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Task":
        """Create Task from its stored JSON shape.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(d, dict):
            raise ValueError(f"Task record must be an object, got {type(d).__name__}")
        task_id = d.get("id")
        name = d.get("name")
        is_done = d.get("isDone", False)
        # bool is a subclass of int, reject it explicitly
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"Task id must be an integer, got {task_id!r}")
        if not isinstance(name, str):
            raise ValueError(f"Task name must be a string, got {name!r}")
        if not isinstance(is_done, bool):
            raise ValueError(f"Task isDone must be a boolean, got {is_done!r}")
        return cls(id=task_id, name=name, is_done=is_done)


class LoadStatus(Enum):
    """Outcome of reading a stored value."""
    ABSENT = "absent"
    LOADED = "loaded"
    CORRUPT = "corrupt"


@dataclass
class LoadResult(Generic[T]):
    """A stored value plus how it was obtained.

    ABSENT and CORRUPT both carry the default value; CORRUPT also carries
    the error message and the raw text that could not be read.
    """
    status: LoadStatus
    value: T
    error: Optional[str] = None
    raw: Optional[str] = None

    @property
    def is_corrupt(self) -> bool:
        return self.status == LoadStatus.CORRUPT


@dataclass
class AppState:
    tasks: List[Task] = field(default_factory=list)
    is_dark_theme: bool = False
    load_error: Optional[str] = None
