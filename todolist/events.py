from enum import Enum, auto
from typing import Callable, Dict, Any, Optional
import inspect
import logging
import threading
import uuid
import weakref

logger = logging.getLogger(__name__)


class AppEvent(Enum):
    """Application-wide events for the observer pattern."""
    # Intents emitted by screens
    TASK_ADD_REQUESTED = auto()
    TASK_TOGGLE_REQUESTED = auto()
    TASK_DELETE_REQUESTED = auto()
    THEME_CHANGE_REQUESTED = auto()
    # State changes emitted by services
    TASK_ADDED = auto()
    TASK_TOGGLED = auto()
    TASK_REMOVED = auto()
    THEME_CHANGED = auto()
    NAV_CHANGED = auto()


class Subscription:
    """Handle returned by EventBus.subscribe().

    Holds the callback strongly when subscribed with strong=True, so the
    Subscription itself must be kept alive and unsubscribed when done.
    """

    def __init__(
        self,
        event_bus: "EventBus",
        event: AppEvent,
        subscription_id: str,
        strong_ref: Optional[Callable[[Any], None]] = None,
    ):
        self._event_bus = event_bus
        self._event = event
        self._subscription_id = subscription_id
        self._active = True
        self._strong_ref = strong_ref

    @property
    def id(self) -> str:
        return self._subscription_id

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if self._active:
            self._event_bus._unsubscribe_by_id(self._event, self._subscription_id)
            self._active = False
            self._strong_ref = None


def _make_ref(callback: Callable[[Any], None]) -> Callable[[], Optional[Callable[[Any], None]]]:
    """Weak reference for bound methods, strong for everything else."""
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback)
    return lambda: callback


class EventBus:
    """Event bus for decoupled component communication.

    Bound-method subscribers are held weakly so a discarded view stops
    receiving events; functions and lambdas are held strongly.
    """

    def __init__(self) -> None:
        self._listeners: Dict[AppEvent, Dict[str, Callable[[], Optional[Callable[[Any], None]]]]] = {}
        self._lock = threading.Lock()

    def subscribe(
        self,
        event: AppEvent,
        callback: Callable[[Any], None],
        strong: bool = False,
    ) -> Subscription:
        """Subscribe a callback to an event. Returns a Subscription for cleanup.

        Example:
            self._sub = event_bus.subscribe(AppEvent.NAV_CHANGED, self._on_nav_changed)
            # Later: self._sub.unsubscribe()
        """
        subscription_id = str(uuid.uuid4())
        with self._lock:
            self._listeners.setdefault(event, {})[subscription_id] = _make_ref(callback)
        return Subscription(
            self, event, subscription_id,
            strong_ref=callback if strong else None,
        )

    def _unsubscribe_by_id(self, event: AppEvent, subscription_id: str) -> None:
        with self._lock:
            listeners = self._listeners.get(event)
            if listeners is not None:
                listeners.pop(subscription_id, None)

    def emit(self, event: AppEvent, data: Any = None) -> None:
        """Emit an event to all subscribers, in subscription order.

        A failing subscriber is logged and does not stop the others.
        Dead weak references are dropped during emission.
        """
        with self._lock:
            items = list(self._listeners.get(event, {}).items())

        dead_refs = []
        for sub_id, ref in items:
            callback = ref()
            if callback is None:
                dead_refs.append(sub_id)
                continue
            try:
                callback(data)
            except Exception:
                logger.exception(f"Error in event handler for {event.name}")

        for sub_id in dead_refs:
            self._unsubscribe_by_id(event, sub_id)

    def listener_count(self, event: AppEvent) -> int:
        with self._lock:
            return len(self._listeners.get(event, {}))

    def clear(self) -> None:
        """Clear all event subscriptions. Used primarily for testing."""
        with self._lock:
            self._listeners.clear()


event_bus = EventBus()
