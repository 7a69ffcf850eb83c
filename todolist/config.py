"""Application configuration - single source of truth for all constants.

Contains colors, dimensions, timings, storage keys and the Screen enum.
Import from here instead of hardcoding values elsewhere to ensure consistency across the app.
"""
import os
from enum import Enum
from pathlib import Path

# Load .env if available (desktop only - not bundled in mobile builds)
try:
    from dotenv import load_dotenv
    load_dotenv(Path(__file__).parent / ".env")
except ImportError:
    pass  # dotenv not available on mobile, skip loading .env


class Screen(Enum):
    """Enum for navigable screens."""
    SPLASH = "splash"
    HOME = "home"
    ADD = "add"
    SETTINGS = "settings"


APP_TITLE = "Moje Zadania"
APP_VERSION = "1.0"
APP_AUTHOR = "Bartek D"

# ============================================================================
# Storage
# ============================================================================

PREFS_FILE_NAME = "prefs.db"

TASKS_KEY = "tasks"
DARK_THEME_KEY = "dark"
CORRUPT_TASKS_KEY = "tasks_corrupt"


def default_db_path() -> Path:
    """Resolve where the preference store lives.

    Packaged Flet apps expose a writable data directory through
    FLET_APP_STORAGE_DATA; desktop runs fall back to the working directory.
    """
    explicit = os.getenv("TODOLIST_DB_PATH", "")
    if explicit:
        return Path(explicit)
    storage_dir = os.getenv("FLET_APP_STORAGE_DATA", "")
    if storage_dir:
        return Path(storage_dir) / PREFS_FILE_NAME
    return Path(PREFS_FILE_NAME)


LANGUAGE = os.getenv("TODOLIST_LANGUAGE", "pl")
LOG_LEVEL = os.getenv("TODOLIST_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("TODOLIST_LOG_FILE", "")

# ============================================================================
# Splash
# ============================================================================

SPLASH_ANIMATION_MS = 800
SPLASH_PAUSE_MS = 1500
SPLASH_TARGET_SCALE = 1.2
SPLASH_ICON_SIZE = 120

# ============================================================================
# Layout
# ============================================================================

SNACK_DURATION_MS = 2000

FONT_SIZE_TASK = 18
FONT_SIZE_TITLE = 16

ICON_SIZE_INFO = 48

SPACING_SM = 4
SPACING_MD = 16
SPACING_LG = 32

PADDING_MD = 8
PADDING_LG = 16

SEED_COLOR = "#6750a4"

COLORS = {
    "danger": "#ff6b6b",
    "white": "white",
    "snack_bg": "#2d2d2d",
}
