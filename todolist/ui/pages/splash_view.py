import flet as ft
from typing import Optional

from config import SPLASH_ANIMATION_MS, SPLASH_ICON_SIZE
from ui.helpers import ScreenLayout


class SplashView:
    """Centered logo whose scale is animated by SplashSequence."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self._logo: Optional[ft.Container] = None

    def set_scale(self, scale: float) -> None:
        if self._logo is None:
            return
        self._logo.scale = scale
        self.page.update()

    def build(self) -> ScreenLayout:
        self._logo = ft.Container(
            content=ft.Icon(ft.Icons.CHECK_CIRCLE, size=SPLASH_ICON_SIZE, color=ft.Colors.PRIMARY),
            scale=0,
            animate_scale=ft.Animation(SPLASH_ANIMATION_MS, ft.AnimationCurve.EASE_OUT),
        )
        content = ft.Container(
            content=self._logo,
            alignment=ft.Alignment(0, 0),
            expand=True,
        )
        return ScreenLayout(appbar=None, content=content)
