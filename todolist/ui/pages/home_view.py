import flet as ft

from config import Screen
from events import EventBus
from i18n import t
from models.entities import AppState
from ui.components.task_tile import TaskTile
from ui.helpers import ScreenLayout, top_bar
from ui.navigation import NavigationManager


class HomeView:
    """Task list with an empty state, a settings action and an add button.

    Reads AppState.tasks on every build, so a re-render after any task
    event shows the current list.
    """

    def __init__(self, state: AppState, nav: NavigationManager, bus: EventBus) -> None:
        self.state = state
        self.nav = nav
        self.bus = bus

    def _on_settings_click(self, e: ft.ControlEvent) -> None:
        if self.nav.current != Screen.HOME:
            return
        self.nav.navigate(Screen.SETTINGS)

    def _on_add_click(self, e: ft.ControlEvent) -> None:
        if self.nav.current != Screen.HOME:
            return
        self.nav.navigate(Screen.ADD)

    def _build_empty_state(self) -> ft.Control:
        return ft.Container(
            content=ft.Text(t("no_tasks"), color=ft.Colors.GREY),
            alignment=ft.Alignment(0, 0),
            expand=True,
        )

    def _build_list(self) -> ft.Control:
        return ft.ListView(
            controls=[TaskTile(task, self.bus).build() for task in self.state.tasks],
            expand=True,
        )

    def build(self) -> ScreenLayout:
        appbar = top_bar(
            t("app_title"),
            actions=[
                ft.IconButton(ft.Icons.SETTINGS, on_click=self._on_settings_click, tooltip=t("settings")),
            ],
        )
        content = self._build_list() if self.state.tasks else self._build_empty_state()
        fab = ft.FloatingActionButton(icon=ft.Icons.ADD, on_click=self._on_add_click, tooltip=t("create"))
        return ScreenLayout(appbar=appbar, content=content, floating_action_button=fab)
