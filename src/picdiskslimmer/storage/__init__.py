"""Storage and persistence layer."""

from .paths import APP_NAME, get_app_data_dir
from .settings import Settings, SettingsStore, StoreResult

__all__ = ["APP_NAME", "Settings", "SettingsStore", "StoreResult", "get_app_data_dir"]
