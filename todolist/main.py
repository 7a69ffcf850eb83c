import flet as ft
import logging

from app import TodoApp
from config import LOG_FILE, LOG_LEVEL
from logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def main(page: ft.Page) -> None:
    app = TodoApp(page)
    await app.start()


def run() -> None:
    setup_logging(LOG_LEVEL, LOG_FILE or None)
    logger.info("Starting todolist")
    ft.run(main)


if __name__ == "__main__":
    run()
