from ui.pages.splash_view import SplashView
from ui.pages.home_view import HomeView
from ui.pages.add_view import AddView
from ui.pages.settings_view import SettingsView

__all__ = ["SplashView", "HomeView", "AddView", "SettingsView"]
