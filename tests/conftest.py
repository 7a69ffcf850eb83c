"""Shared fixtures for todolist tests."""
from pathlib import Path

import pytest
import pytest_asyncio

from core import ServiceContainer, bootstrap, shutdown
from events import AppEvent, EventBus


class EventCollector:
    """Subscribe to events and record them for assertions."""

    def __init__(self, bus: EventBus, *events: AppEvent):
        self.received: list[tuple[AppEvent, object]] = []
        self._subs = []
        for ev in events:
            sub = bus.subscribe(ev, lambda data, _ev=ev: self.received.append((_ev, data)))
            self._subs.append(sub)

    def count(self, event: AppEvent) -> int:
        return sum(1 for ev, _ in self.received if ev == event)

    def data(self, event: AppEvent) -> list:
        return [d for ev, d in self.received if ev == event]

    def cleanup(self):
        for sub in self._subs:
            sub.unsubscribe()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def collector(bus: EventBus):
    c = EventCollector(bus, *AppEvent)
    yield c
    c.cleanup()


@pytest_asyncio.fixture
async def services(bus: EventBus) -> ServiceContainer:
    """Provide a fresh ServiceContainer backed by an in-memory store."""
    svc = await bootstrap(db_path=Path(":memory:"), bus=bus)
    yield svc
    await shutdown(svc)


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Path of an on-disk store, for tests that restart the app."""
    return tmp_path / "prefs.db"
