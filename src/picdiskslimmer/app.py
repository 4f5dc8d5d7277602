"""Main application orchestrator."""

import customtkinter as ctk
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.events import EventBus, Event, EventType
from .storage.settings import Settings, SettingsStore
from .i18n import _, init_translator
from .gui.main_window import MainWindow

logger = logging.getLogger(__name__)


class PicDiskSlimmerApp:
    """Main application class that wires the settings store to the window."""

    def __init__(self, data_dir: Optional[Path] = None):
        """Initialize the application.

        Args:
            data_dir: Override for the settings directory
        """
        self._setup_logging()

        logger.info("Initializing PicDiskSlimmer")

        init_translator()

        self.event_bus = EventBus()
        self.settings = SettingsStore(data_dir, event_bus=self.event_bus)

        self._setup_event_handlers()

        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        load_result = self.settings.try_load()

        self.window = MainWindow(self, load_result.settings, on_close=self.quit)
        if not load_result.ok:
            self.window.set_status(_("status_load_failed"), error=True)

    def _setup_logging(self) -> None:
        """Configure logging."""
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.StreamHandler(sys.stdout),
            ],
        )

    def _setup_event_handlers(self) -> None:
        """Set up event subscriptions."""
        self.event_bus.subscribe(EventType.SETTINGS_SAVED, self._on_settings_saved)
        self.event_bus.subscribe(EventType.SETTINGS_SAVE_FAILED, self._on_settings_save_failed)

    def _on_settings_saved(self, event: Event) -> None:
        self.window.set_status(_("status_saved"))

    def _on_settings_save_failed(self, event: Event) -> None:
        self.window.set_status(_("status_save_failed", error=event.data.error), error=True)

    def save_settings(self, settings: Settings) -> bool:
        """Persist settings; the outcome is reported through the event bus.

        Args:
            settings: Settings from the window

        Returns:
            True if saved
        """
        return self.settings.save(settings)

    def run(self) -> None:
        """Run the application main loop."""
        logger.info(f"Settings file: {self.settings.path}")
        self.window.mainloop()

    def quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting application")

        try:
            self.window.quit()
            self.window.destroy()
        except Exception as e:
            logger.error(f"Error destroying window: {e}")


def main():
    """Application entry point."""
    app = PicDiskSlimmerApp()
    app.run()


if __name__ == "__main__":
    main()
