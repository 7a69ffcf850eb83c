import flet as ft

from config import FONT_SIZE_TASK, PADDING_LG, PADDING_MD
from events import AppEvent, EventBus
from i18n import t
from models.entities import Task


class TaskTile:
    """Single task card that emits events for user interactions.

    Tapping the card requests a done toggle, the trailing icon requests a
    delete. The tile never touches services directly.
    """

    def __init__(self, task: Task, bus: EventBus) -> None:
        self.task = task
        self.bus = bus

    def _on_tap(self, e: ft.ControlEvent) -> None:
        self.bus.emit(AppEvent.TASK_TOGGLE_REQUESTED, self.task)

    def _on_delete(self, e: ft.ControlEvent) -> None:
        self.bus.emit(AppEvent.TASK_DELETE_REQUESTED, self.task)

    def _title(self) -> ft.Text:
        if self.task.is_done:
            return ft.Text(
                self.task.name,
                size=FONT_SIZE_TASK,
                expand=True,
                color=ft.Colors.GREY,
                style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH),
            )
        return ft.Text(self.task.name, size=FONT_SIZE_TASK, expand=True)

    def build(self) -> ft.Card:
        return ft.Card(
            margin=PADDING_MD,
            content=ft.Container(
                padding=PADDING_LG,
                ink=True,
                on_click=self._on_tap,
                content=ft.Row(
                    [
                        self._title(),
                        ft.IconButton(ft.Icons.DELETE, on_click=self._on_delete, tooltip=t("delete")),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                ),
            ),
        )
