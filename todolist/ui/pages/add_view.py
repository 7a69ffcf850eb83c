import flet as ft
from typing import Optional

from config import PADDING_LG, SPACING_MD
from events import AppEvent, EventBus
from i18n import t
from services.task_service import is_blank_task_name
from ui.helpers import ScreenLayout, top_bar
from ui.navigation import NavigationManager


class AddView:
    """Single text field plus a save button.

    Saving blank text does nothing; otherwise the add intent is emitted and
    the screen pops back to HOME.
    """

    def __init__(self, nav: NavigationManager, bus: EventBus) -> None:
        self.nav = nav
        self.bus = bus
        self._field: Optional[ft.TextField] = None

    def submit(self, text: Optional[str]) -> bool:
        """Emit the add intent for non-blank text and go back. Returns whether it did."""
        if is_blank_task_name(text):
            return False
        self.bus.emit(AppEvent.TASK_ADD_REQUESTED, text)
        self.nav.back()
        return True

    def _on_save(self, e: ft.ControlEvent) -> None:
        self.submit(self._field.value if self._field else None)

    def _on_back(self, e: ft.ControlEvent) -> None:
        self.nav.back()

    def build(self) -> ScreenLayout:
        self._field = ft.TextField(
            label=t("task_input_label"),
            autofocus=True,
            on_submit=self._on_save,
        )
        content = ft.Container(
            padding=PADDING_LG,
            content=ft.Column(
                [
                    self._field,
                    ft.Button(t("save"), on_click=self._on_save),
                ],
                spacing=SPACING_MD,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            ),
        )
        return ScreenLayout(appbar=top_bar(t("add_task_title"), on_back=self._on_back), content=content)
