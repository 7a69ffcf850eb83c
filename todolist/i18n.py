"""Internationalization module - provides t("key") for translated strings.

All user-facing text must use t("key"). Polish is the default language,
English is available through TODOLIST_LANGUAGE=en.
"""
from typing import Dict, Tuple

from config import LANGUAGE

_current_language: str = "pl"

LANGUAGES: Tuple[str, ...] = ("pl", "en")

_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "app_title": {"pl": "Moje Zadania", "en": "My Tasks"},
    "no_tasks": {"pl": "Brak zadań!", "en": "No tasks!"},
    "add_task_title": {"pl": "Dodaj zadanie", "en": "Add task"},
    "task_input_label": {"pl": "Co masz do zrobienia?", "en": "What do you need to do?"},
    "save": {"pl": "ZAPISZ", "en": "SAVE"},
    "settings": {"pl": "Ustawienia", "en": "Settings"},
    "dark_mode": {"pl": "Tryb ciemny", "en": "Dark mode"},
    "about_app": {"pl": "O aplikacji", "en": "About"},
    "version": {"pl": "Wersja", "en": "Version"},
    "author": {"pl": "Autor", "en": "Author"},
    "back": {"pl": "Wstecz", "en": "Back"},
    "delete": {"pl": "Usuń", "en": "Delete"},
    "create": {"pl": "Dodaj", "en": "Create"},

    # Errors
    "tasks_unreadable": {
        "pl": "Nie udało się odczytać zapisanych zadań",
        "en": "Saved tasks could not be read",
    },
    "theme_unreadable": {
        "pl": "Nie udało się odczytać motywu, przywrócono jasny",
        "en": "Saved theme could not be read, using light",
    },
    "save_failed": {"pl": "Nie udało się zapisać zmian", "en": "Could not save changes"},
}


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """Set the current language. Unknown codes are ignored."""
    global _current_language
    if lang in LANGUAGES:
        _current_language = lang


def t(key: str) -> str:
    """Get translated string for the given key.

    Falls back to Polish if translation not found for current language.
    Falls back to the key itself if not found in any language.
    """
    if key not in _TRANSLATIONS:
        return key

    translations = _TRANSLATIONS[key]

    if _current_language in translations:
        return translations[_current_language]

    if "pl" in translations:
        return translations["pl"]

    return key


set_language(LANGUAGE)
