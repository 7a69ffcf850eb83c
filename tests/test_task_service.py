"""Tests for TaskService, SettingsService and task name handling."""
import pytest

from core import ServiceContainer
from events import AppEvent
from models.entities import Task
from services.persistence import PersistenceAdapter
from services.task_service import TaskIdGenerator, is_blank_task_name


async def reload_tasks(services: ServiceContainer):
    result = await PersistenceAdapter(services.store).load_tasks()
    return result.value


# ===========================================================================
# add
# ===========================================================================

class TestAdd:
    async def test_appends_pending_task(self, services: ServiceContainer):
        before = len(services.state.tasks)
        task = await services.tasks.add("Buy milk")
        assert len(services.state.tasks) == before + 1
        assert services.state.tasks[-1] == task
        assert task.name == "Buy milk"
        assert task.is_done is False

    async def test_preserves_insertion_order(self, services: ServiceContainer):
        for name in ("one", "two", "three"):
            await services.tasks.add(name)
        assert [t.name for t in services.state.tasks] == ["one", "two", "three"]

    async def test_persists_immediately(self, services: ServiceContainer):
        await services.tasks.add("Persist me")
        assert [t.name for t in await reload_tasks(services)] == ["Persist me"]

    async def test_ids_unique_for_rapid_creation(self, services: ServiceContainer):
        tasks = [await services.tasks.add(f"t{i}") for i in range(50)]
        assert len({t.id for t in tasks}) == 50

    async def test_emits_task_added(self, services: ServiceContainer, collector):
        task = await services.tasks.add("Event")
        assert collector.data(AppEvent.TASK_ADDED) == [task]


# ===========================================================================
# remove
# ===========================================================================

class TestRemove:
    async def test_removes_matching_task(self, services: ServiceContainer):
        keep = await services.tasks.add("Keep")
        gone = await services.tasks.add("Gone")
        assert await services.tasks.remove(gone) is True
        assert services.state.tasks == [keep]
        assert await reload_tasks(services) == [keep]

    async def test_missing_task_is_noop(self, services: ServiceContainer, collector):
        await services.tasks.add("Only")
        before = list(services.state.tasks)
        stranger = Task(id=-1, name="Not here")
        assert await services.tasks.remove(stranger) is False
        assert services.state.tasks == before
        assert collector.count(AppEvent.TASK_REMOVED) == 0

    async def test_matches_by_value_not_id(self, services: ServiceContainer):
        task = await services.tasks.add("Value")
        stale = Task(id=task.id, name=task.name, is_done=True)
        assert await services.tasks.remove(stale) is False
        assert services.state.tasks == [task]

    async def test_emits_task_removed(self, services: ServiceContainer, collector):
        task = await services.tasks.add("Bye")
        await services.tasks.remove(task)
        assert collector.data(AppEvent.TASK_REMOVED) == [task]


# ===========================================================================
# toggle_done
# ===========================================================================

class TestToggleDone:
    async def test_flips_flag_in_place(self, services: ServiceContainer):
        first = await services.tasks.add("First")
        middle = await services.tasks.add("Middle")
        last = await services.tasks.add("Last")
        toggled = await services.tasks.toggle_done(middle)
        assert toggled.is_done is True
        assert services.state.tasks == [first, toggled, last]

    async def test_toggle_twice_restores(self, services: ServiceContainer):
        task = await services.tasks.add("Twice")
        once = await services.tasks.toggle_done(task)
        twice = await services.tasks.toggle_done(once)
        assert twice == task
        assert (await reload_tasks(services))[0].is_done is False

    async def test_matches_by_id(self, services: ServiceContainer):
        task = await services.tasks.add("By id")
        stale = Task(id=task.id, name="renamed elsewhere")
        toggled = await services.tasks.toggle_done(stale)
        assert toggled.name == "By id"
        assert toggled.is_done is True

    async def test_unknown_id_is_noop(self, services: ServiceContainer, collector):
        await services.tasks.add("Only")
        before = list(services.state.tasks)
        assert await services.tasks.toggle_done(Task(id=-5, name="?")) is None
        assert services.state.tasks == before
        assert collector.count(AppEvent.TASK_TOGGLED) == 0

    async def test_persisted_flag_survives_reload(self, services: ServiceContainer):
        task = await services.tasks.add("Done soon")
        await services.tasks.toggle_done(task)
        assert (await reload_tasks(services))[0].is_done is True


class TestRoundTripLaw:
    async def test_mixed_operations_reload_identically(self, services: ServiceContainer):
        a = await services.tasks.add("a")
        b = await services.tasks.add("b")
        c = await services.tasks.add("c")
        await services.tasks.toggle_done(a)
        await services.tasks.remove(b)
        d = await services.tasks.add("d")
        await services.tasks.toggle_done(d)
        await services.tasks.remove(Task(id=999, name="ghost"))
        assert await reload_tasks(services) == services.state.tasks
        assert [(t.name, t.is_done) for t in services.state.tasks] == [
            ("a", True), ("c", False), ("d", True),
        ]
        assert c in services.state.tasks


# ===========================================================================
# theme
# ===========================================================================

class TestSettings:
    async def test_set_theme_persists(self, services: ServiceContainer):
        await services.settings.set_theme(True)
        assert services.state.is_dark_theme is True
        assert (await services.persistence.load_theme()).value is True

    async def test_set_theme_emits(self, services: ServiceContainer, collector):
        await services.settings.set_theme(True)
        await services.settings.set_theme(False)
        assert collector.data(AppEvent.THEME_CHANGED) == [True, False]


# ===========================================================================
# helpers
# ===========================================================================

class TestIsBlankTaskName:
    @pytest.mark.parametrize("text", ["", " ", "\t\n ", None])
    def test_blank_is_rejected(self, text):
        assert is_blank_task_name(text) is True

    def test_padded_text_is_not_blank(self):
        assert is_blank_task_name("  Buy milk ") is False

    async def test_name_stored_as_typed(self, services: ServiceContainer):
        await services.tasks.add("  Buy milk ")
        reloaded = await services.persistence.load_tasks()
        assert [t.name for t in reloaded.value] == ["  Buy milk "]


class TestTaskIdGenerator:
    def test_same_clock_tick_still_unique(self):
        ids = TaskIdGenerator(clock=lambda: 1000)
        assert [ids.next_id() for _ in range(3)] == [1000, 1001, 1002]

    def test_follows_clock_when_ahead(self):
        ticks = iter([10, 500])
        ids = TaskIdGenerator(clock=lambda: next(ticks))
        assert ids.next_id() == 10
        assert ids.next_id() == 500

    def test_seeded_above_existing(self):
        ids = TaskIdGenerator([5, 7000], clock=lambda: 10)
        assert ids.next_id() == 7001
