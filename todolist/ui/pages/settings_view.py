import flet as ft

from config import (
    APP_AUTHOR,
    APP_VERSION,
    FONT_SIZE_TITLE,
    ICON_SIZE_INFO,
    PADDING_LG,
    SPACING_LG,
    SPACING_MD,
    SPACING_SM,
)
from events import AppEvent, EventBus
from i18n import t
from models.entities import AppState
from ui.helpers import ScreenLayout, top_bar
from ui.navigation import NavigationManager


class SettingsView:
    """Dark mode switch plus static information about the app."""

    def __init__(self, state: AppState, nav: NavigationManager, bus: EventBus) -> None:
        self.state = state
        self.nav = nav
        self.bus = bus

    def _on_theme_change(self, e: ft.ControlEvent) -> None:
        self.bus.emit(AppEvent.THEME_CHANGE_REQUESTED, bool(e.control.value))

    def _on_back(self, e: ft.ControlEvent) -> None:
        self.nav.back()

    def _build_about(self) -> ft.Column:
        return ft.Column(
            [
                ft.Icon(ft.Icons.INFO, size=ICON_SIZE_INFO, color=ft.Colors.GREY),
                ft.Text(t("about_app"), size=FONT_SIZE_TITLE, weight=ft.FontWeight.W_500),
                ft.Text(f"{t('version')}: {APP_VERSION}", color=ft.Colors.GREY),
                ft.Text(f"{t('author')}: {APP_AUTHOR}", color=ft.Colors.GREY),
            ],
            spacing=SPACING_SM,
        )

    def build(self) -> ScreenLayout:
        theme_row = ft.Row(
            [
                ft.Text(t("dark_mode")),
                ft.Switch(value=self.state.is_dark_theme, on_change=self._on_theme_change),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        content = ft.Container(
            padding=PADDING_LG,
            content=ft.Column(
                [
                    theme_row,
                    ft.Container(height=SPACING_LG),
                    ft.Divider(),
                    ft.Container(height=SPACING_MD),
                    self._build_about(),
                ],
            ),
        )
        return ScreenLayout(appbar=top_bar(t("settings"), on_back=self._on_back), content=content)
