import flet as ft
from dataclasses import dataclass
from typing import Callable, List, Optional

from config import COLORS, SEED_COLOR, SNACK_DURATION_MS
from i18n import t


@dataclass
class ScreenLayout:
    """Everything a screen puts on the page: app bar, body and optional FAB."""
    appbar: Optional[ft.AppBar]
    content: ft.Control
    floating_action_button: Optional[ft.FloatingActionButton] = None


def build_theme() -> ft.Theme:
    return ft.Theme(color_scheme_seed=SEED_COLOR)


def theme_mode_for(is_dark: bool) -> ft.ThemeMode:
    return ft.ThemeMode.DARK if is_dark else ft.ThemeMode.LIGHT


def top_bar(
    title: str,
    on_back: Optional[Callable[[ft.ControlEvent], None]] = None,
    actions: Optional[List[ft.Control]] = None,
) -> ft.AppBar:
    """App bar with an optional back arrow on the leading side."""
    leading = None
    if on_back is not None:
        leading = ft.IconButton(ft.Icons.ARROW_BACK, on_click=on_back, tooltip=t("back"))
    return ft.AppBar(
        title=ft.Text(title),
        leading=leading,
        actions=actions or [],
    )


class SnackService:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.snack = ft.SnackBar(
            content=ft.Text(""),
            bgcolor=COLORS["snack_bg"],
            duration=SNACK_DURATION_MS,
        )
        page.overlay.append(self.snack)

    def show(
        self,
        message: str,
        color: Optional[str] = None,
        update: bool = True,
    ) -> None:
        self.snack.content = ft.Text(message, color=COLORS["white"])
        self.snack.bgcolor = color or COLORS["snack_bg"]
        self.snack.open = True
        if update:
            self.page.update()
