"""Tests for NavigationManager and the splash sequence."""
import pytest

from config import SPLASH_TARGET_SCALE, Screen
from events import AppEvent
from ui.navigation import NavigationError, NavigationManager
from ui.splash import SplashSequence


@pytest.fixture
def nav(bus) -> NavigationManager:
    return NavigationManager(bus)


@pytest.fixture
def home(nav: NavigationManager) -> NavigationManager:
    nav.finish_splash()
    return nav


class TestNavigationManager:
    def test_starts_on_splash(self, nav: NavigationManager):
        assert nav.current == Screen.SPLASH
        assert nav.history == [Screen.SPLASH]

    def test_finish_splash_clears_history(self, nav: NavigationManager):
        nav.finish_splash()
        assert nav.history == [Screen.HOME]
        assert nav.back() is False
        assert nav.current == Screen.HOME

    def test_finish_splash_only_once(self, home: NavigationManager, collector):
        home.navigate(Screen.ADD)
        home.finish_splash()
        assert home.current == Screen.ADD
        assert collector.count(AppEvent.NAV_CHANGED) == 1

    @pytest.mark.parametrize("target", [Screen.ADD, Screen.SETTINGS])
    def test_push_and_pop(self, home: NavigationManager, target: Screen):
        home.navigate(target)
        assert home.history == [Screen.HOME, target]
        assert home.back() is True
        assert home.history == [Screen.HOME]

    @pytest.mark.parametrize(
        "start,target",
        [
            (Screen.ADD, Screen.SETTINGS),
            (Screen.SETTINGS, Screen.ADD),
            (Screen.ADD, Screen.ADD),
        ],
    )
    def test_disallowed_push(self, home: NavigationManager, start: Screen, target: Screen):
        home.navigate(start)
        with pytest.raises(NavigationError):
            home.navigate(target)
        assert home.history == [Screen.HOME, start]

    def test_cannot_push_from_splash(self, nav: NavigationManager):
        with pytest.raises(NavigationError):
            nav.navigate(Screen.HOME)

    def test_emits_nav_changed(self, nav: NavigationManager, collector):
        nav.finish_splash()
        nav.navigate(Screen.SETTINGS)
        nav.back()
        assert collector.data(AppEvent.NAV_CHANGED) == [Screen.HOME, Screen.SETTINGS, Screen.HOME]

    def test_back_at_root_emits_nothing(self, home: NavigationManager, collector):
        home.back()
        assert collector.count(AppEvent.NAV_CHANGED) == 0


class FakeSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class TestSplashSequence:
    async def test_animates_pauses_then_goes_home(self, nav: NavigationManager):
        scales = []
        sleep = FakeSleep()
        splash = SplashSequence(nav, scales.append, sleep=sleep)

        await splash.run()

        assert scales == [SPLASH_TARGET_SCALE]
        assert sleep.calls == [0.8, 1.5]
        assert splash.total_ms == 2300
        assert nav.history == [Screen.HOME]

    async def test_runs_only_once(self, nav: NavigationManager, collector):
        sleep = FakeSleep()
        splash = SplashSequence(nav, lambda scale: None, sleep=sleep)
        await splash.run()
        await splash.run()
        assert len(sleep.calls) == 2
        assert collector.count(AppEvent.NAV_CHANGED) == 1

    async def test_stays_on_splash_until_done(self, nav: NavigationManager):
        seen = []

        async def sleep(seconds: float) -> None:
            seen.append(nav.current)

        await SplashSequence(nav, lambda scale: None, sleep=sleep).run()
        assert seen == [Screen.SPLASH, Screen.SPLASH]
        assert nav.current == Screen.HOME
