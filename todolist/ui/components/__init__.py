from ui.components.task_tile import TaskTile

__all__ = ["TaskTile"]
